import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from share_documents.models import Share, ShareDocumentError, ShareSet
from share_documents.schema import KeysModel, ShareEntryModel

log = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"[+-]?\d+")


def _parse_index(key: str) -> int | None:
    k = (key or "").strip()
    if not _INDEX_RE.fullmatch(k):
        return None
    return int(k)


def parse_share_set(raw: Any, source: str | None = None) -> ShareSet:
    if not isinstance(raw, dict):
        raise ShareDocumentError("share document must be a JSON object")
    if "keys" not in raw:
        raise ShareDocumentError("share document has no 'keys' entry")

    try:
        keys = KeysModel.model_validate(raw["keys"])
        shares: list[Share] = []
        for key, entry in raw.items():
            if key == "keys":
                continue
            x = _parse_index(key)
            if x is None:
                log.debug(f"Ignoring non-index key {key!r}")
                continue
            e = ShareEntryModel.model_validate(entry)
            shares.append(Share(x=x, base=e.base, digits=e.value))
    except ValidationError as e:
        raise ShareDocumentError(f"invalid share document: {e}") from e

    shares.sort(key=lambda s: s.x)
    return ShareSet(n=keys.n, k=keys.k, shares=tuple(shares), source=source)


def loads_share_sets(text: str, source: str | None = None) -> list[ShareSet]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ShareDocumentError(f"invalid JSON: {e}") from e

    if isinstance(data, list):
        return [parse_share_set(d, source=source) for d in data]
    return [parse_share_set(data, source=source)]


def load_share_sets(path: str) -> list[ShareSet]:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return loads_share_sets(text, source=path)
