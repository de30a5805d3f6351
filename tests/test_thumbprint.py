import unittest

from cryptography.hazmat.primitives.asymmetric import ed25519
from jwcrypto import jwk

from jwk_module.utils.thumbprint import canonical_json, okp_thumbprint, rsa_thumbprint, thumbprint
from tests.helpers import RFC8037_THUMBPRINT, RFC8037_X, rsa_der


class ThumbprintTesting(unittest.TestCase):
    def test_canonical_json_is_sorted_and_compact(self):
        self.assertEqual(
            canonical_json({"x": "abc", "kty": "OKP", "crv": "Ed25519"}),
            b'{"crv":"Ed25519","kty":"OKP","x":"abc"}',
        )

    def test_thumbprint_has_no_padding(self):
        tp = thumbprint({"kty": "RSA"})
        self.assertNotIn("=", tp)
        self.assertEqual(len(tp), 43)

    def test_okp_rfc8037_vector(self):
        self.assertEqual(okp_thumbprint(RFC8037_X), RFC8037_THUMBPRINT)

    def test_okp_matches_jwcrypto(self):
        pub = ed25519.Ed25519PrivateKey.generate().public_key()
        expected = jwk.JWK.from_pyca(pub).thumbprint()
        self.assertEqual(okp_thumbprint(pub.public_bytes_raw()), expected)

    def test_rsa_matches_jwcrypto(self):
        priv, _, _ = rsa_der()
        pub = priv.public_key()
        expected = jwk.JWK.from_pyca(pub).thumbprint()
        self.assertEqual(rsa_thumbprint(pub.public_numbers()), expected)


if __name__ == "__main__":
    unittest.main()
