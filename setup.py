from setuptools import setup, find_packages


setup(name='monty',
      version='0.0.1',
      py_modules=['monty'],
      packages=find_packages(exclude=['tests', 'tests.*']),
      include_package_data=True,
      python_requires='>=3.8',
      install_requires=[
          'Click>=8.2',
      ],
      extras_require={
          'test': ['pytest'],
      },
      entry_points='''
        [console_scripts]
        monty=monty:cli
    ''',
      )
