"""The canonical RSA key record shared by every parser and encoder."""
from cryptography.hazmat.primitives.asymmetric import rsa

from rsakeyconv.codec import int_to_bytes

PRIVATE_FIELDS = ('d', 'p', 'q', 'dp', 'dq', 'qinv')


class CanonicalKey:
    """
    An RSA key, public or private, held as plain integers.

    Do not mutate; parsers build one instance per input and encoders only
    read it.

    Attributes:
        n (int): The modulus.
        e (int): The public exponent.
        d (int): The private exponent, or None for public keys.
        p (int): First prime factor of the modulus, or None.
        q (int): Second prime factor of the modulus, or None.
        dp (int): ``d mod (p-1)``, or None.
        dq (int): ``d mod (q-1)``, or None.
        qinv (int): ``q^-1 mod p``, or None.
    """

    def __init__(self, n, e, d=None, p=None, q=None, dp=None, dq=None, qinv=None):
        """
        Build a key record.

        Either no private field is given, all six are given, or exactly
        ``d``, ``p`` and ``q`` are given, in which case the CRT parameters
        are derived from them.

        Raises:
            ValueError: If ``n`` or ``e`` is not a positive integer, or the
                private fields are only partly supplied.
        """
        if not n or n < 0 or not e or e < 0:
            raise ValueError("RSA modulus and public exponent must be positive integers")

        supplied = {name for name, value in zip(PRIVATE_FIELDS, (d, p, q, dp, dq, qinv))
                    if value is not None}
        if supplied == {'d', 'p', 'q'}:
            dp = rsa.rsa_crt_dmp1(d, p)
            dq = rsa.rsa_crt_dmq1(d, q)
            qinv = rsa.rsa_crt_iqmp(p, q)
        elif supplied and supplied != set(PRIVATE_FIELDS):
            missing = ', '.join(sorted(set(PRIVATE_FIELDS) - supplied))
            raise ValueError(f"Some RSA private components are missing: {missing}")

        self.n = n
        self.e = e
        self.d = d
        self.p = p
        self.q = q
        self.dp = dp
        self.dq = dq
        self.qinv = qinv

    @classmethod
    def from_public_numbers(cls, numbers):
        return cls(n=numbers.n, e=numbers.e)

    @classmethod
    def from_private_numbers(cls, numbers):
        public = numbers.public_numbers
        return cls(n=public.n, e=public.e, d=numbers.d, p=numbers.p, q=numbers.q,
                   dp=numbers.dmp1, dq=numbers.dmq1, qinv=numbers.iqmp)

    def has_private(self):
        """Whether every private component is present."""
        return self.d is not None

    def public_key(self):
        return CanonicalKey(n=self.n, e=self.e)

    def size_in_bytes(self):
        return len(int_to_bytes(self.n))

    def size_in_bits(self):
        """Key size as reported by the Racoon header, a whole number of bytes."""
        return self.size_in_bytes() * 8

    def public_numbers(self):
        return rsa.RSAPublicNumbers(e=self.e, n=self.n)

    def private_numbers(self):
        if not self.has_private():
            raise AttributeError("No private components available for public keys")
        return rsa.RSAPrivateNumbers(
            p=self.p,
            q=self.q,
            d=self.d,
            dmp1=self.dp,
            dmq1=self.dq,
            iqmp=self.qinv,
            public_numbers=self.public_numbers(),
        )

    def _components(self):
        return (self.n, self.e) + tuple(getattr(self, name) for name in PRIVATE_FIELDS)

    def __eq__(self, other):
        if not isinstance(other, CanonicalKey):
            return NotImplemented
        return self._components() == other._components()

    __hash__ = None

    def __repr__(self):
        kind = "private" if self.has_private() else "public"
        return f"<CanonicalKey {kind} {self.size_in_bits()} bits e={self.e}>"
