"""
Хеширование паролей.
"""
import hashlib

PASSWORD_HASH_LENGTH = 64


def hash_password(plain_password: str, pepper: str) -> str:
    """
    Получить хеш пароля с pepper.

    SHA-256 от ``plain_password + pepper`` в виде 64 шестнадцатеричных
    символов в верхнем регистре. Функция детерминирована: при входе
    пароль хешируется повторно и сравнивается с сохранённым хешем.
    """
    if plain_password is None or pepper is None:
        raise TypeError("Пароль и pepper должны быть строками")
    digest = hashlib.sha256((plain_password + pepper).encode("utf-8"))
    return digest.hexdigest().upper()
