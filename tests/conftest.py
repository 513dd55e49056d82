import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from rsakeyconv import CanonicalKey


@pytest.fixture(scope="session")
def private_numbers():
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return private_key.private_numbers()


@pytest.fixture(scope="session")
def private_key(private_numbers):
    return CanonicalKey.from_private_numbers(private_numbers)


@pytest.fixture(scope="session")
def public_key(private_key):
    return private_key.public_key()


@pytest.fixture(scope="session")
def private_pem(private_numbers):
    return private_numbers.private_key().private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption()
    ).decode("ascii")


@pytest.fixture(scope="session")
def public_pem(private_numbers):
    return private_numbers.public_numbers.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    ).decode("ascii")


@pytest.fixture(scope="session")
def racoon_text(private_key):
    return (
        ": RSA {\n"
        "\tModulus: 0x%x\n"
        "\tPublicExponent: 0x%x\n"
        "\tPrivateExponent: 0x%x\n"
        "\tPrime1: 0x%x\n"
        "\tPrime2: 0x%x\n"
        "\t}\n"
    ) % (private_key.n, private_key.e, private_key.d, private_key.p, private_key.q)
