# coding=utf-8
import string


def is_number(token):
    """
    check that `token` is an unsigned decimal literal
    :param token: str or None
    :return: True only for a non-empty run of ASCII digits
    """
    if not token:
        return False
    return all(char in string.digits for char in token)
