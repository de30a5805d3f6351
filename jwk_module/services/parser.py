import json
from typing import Any, Dict, List

from cryptography.hazmat.primitives import serialization
from jwcrypto import jwk
from jwcrypto.common import JWException, base64url_decode, json_decode

from jwk_module.models.key import Key
from jwk_module.utils.errors import KeyDecodeError
from jwk_module.utils.log import get_logger

logger = get_logger("parse")


def _decode_json(source: str) -> Any:
    try:
        return json_decode(source)
    except (ValueError, TypeError) as exc:
        raise KeyDecodeError(str(exc)) from exc


def _from_fields(fields: Any) -> Key:
    if not isinstance(fields, dict):
        raise KeyDecodeError(f"JWK must be a JSON object, got {type(fields).__name__}")
    if "kty" not in fields:
        raise KeyDecodeError("JWK is missing the 'kty' member")

    try:
        decoded = jwk.JWK(**fields)
        if fields["kty"] == "oct":
            material, is_public = base64url_decode(fields["k"]), False
        elif decoded.has_private:
            pem = decoded.export_to_pem(private_key=True, password=None)
            material, is_public = serialization.load_pem_private_key(pem, password=None), False
        else:
            material, is_public = serialization.load_pem_public_key(decoded.export_to_pem()), True
    except (JWException, ValueError, TypeError, KeyError) as exc:
        raise KeyDecodeError(str(exc)) from exc

    return Key(
        key=material,
        key_type=fields["kty"],
        is_public=is_public,
        algorithm=fields.get("alg"),
        use=fields.get("use"),
        key_id=fields.get("kid"),
    )


def parse(source: str) -> Key:
    key = _from_fields(_decode_json(source))
    logger.debug("parsed %s key kid=%s", key.key_type, key.key_id)
    return key


def parse_key_set(source: str) -> List[Key]:
    """Decode a JWK-Set document, keeping document order and duplicates."""
    document = _decode_json(source)
    if not isinstance(document, dict) or not isinstance(document.get("keys"), list):
        raise KeyDecodeError("JWK-Set must be a JSON object with a 'keys' array")

    keys = [_from_fields(fields) for fields in document["keys"]]
    logger.debug("parsed key set with %d keys", len(keys))
    return keys


def export_key_set(keys: List[Key], private_key: bool = False) -> str:
    document: Dict[str, Any] = {"keys": [key.as_dict(private_key) for key in keys]}
    return json.dumps(document, separators=(",", ":"))
