import re
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from bs4 import BeautifulSoup

from .errors import RemoteError

_WHITESPACE = re.compile(r"\s+")
OK_CLASSES = ("okmsg",)
ERROR_CLASSES = ("errormsg",)


class Response(Mapping):
    """Normalized API result: ``status``, ``message`` and ``data``.

    Reads like a mapping (``response["message"]``) or like an object
    (``response.message``). ``raw`` keeps the decoded body as received.
    """

    __slots__ = ("_fields", "raw")

    def __init__(
        self,
        status: bool,
        message: str = "",
        data: Any = None,
        raw: Any = None,
    ) -> None:
        self._fields: Dict[str, Any] = {
            "status": bool(status),
            "message": message or "",
            "data": data,
        }
        self.raw = raw

    @property
    def status(self) -> bool:
        return self._fields["status"]

    @property
    def message(self) -> str:
        return self._fields["message"]

    @property
    def data(self) -> Any:
        return self._fields["data"]

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Response(status={self.status!r}, message={self.message!r})"


# ---------------------------------------------------------------------------
# Envelope parsers
# ---------------------------------------------------------------------------

def is_success(value: Any) -> bool:
    """WHM flags success as 1, "1" or true; anything else is a failure."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    return isinstance(value, str) and value.strip().lower() in ("1", "true")


def _from_cpanel_result(envelope: Any) -> Dict[str, Any]:
    if not isinstance(envelope, dict):
        raise RemoteError("Malformed cpanelresult envelope", response=envelope)
    error = envelope.get("error")
    event = envelope.get("event")
    status = not error
    if isinstance(event, dict) and "result" in event:
        status = status and is_success(event["result"])
    return {"status": status, "message": str(error or ""), "data": envelope.get("data")}


def _from_metadata(body: Dict[str, Any]) -> Dict[str, Any]:
    metadata = body["metadata"]
    if not isinstance(metadata, dict):
        raise RemoteError("Malformed metadata envelope", response=body)
    return {
        "status": is_success(metadata.get("result", 0)),
        "message": str(metadata.get("reason") or ""),
        "data": body.get("data"),
    }


def _from_result_list(results: list) -> Dict[str, Any]:
    first = results[0] if results else {}
    if not isinstance(first, dict):
        raise RemoteError("Malformed result entry", response=results)
    return {
        "status": is_success(first.get("status", 1)),
        "message": str(first.get("statusmsg") or ""),
        "data": results,
    }


def normalize_response(body: Any, response_key: Optional[str] = None) -> Response:
    """Fold the shapes WHM and cPanel answer with into one ``Response``.

    Raises RemoteError when ``body`` is not a mapping or an envelope is
    malformed. Failure statuses are left in the returned response; the
    caller decides whether to raise.
    """
    if not isinstance(body, dict):
        raise RemoteError(
            f"Expected a JSON object, got {type(body).__name__}", response=body
        )

    if "cpanelresult" in body:
        fields = _from_cpanel_result(body["cpanelresult"])
    elif "metadata" in body:
        fields = _from_metadata(body)
    elif isinstance(body.get("result"), list):
        fields = _from_result_list(body["result"])
    elif "status" in body or "statusmsg" in body:
        fields = {
            "status": is_success(body.get("status", 1)),
            "message": str(body.get("statusmsg") or ""),
            "data": body,
        }
    else:
        fields = {"status": True, "message": "", "data": body}

    if response_key is not None:
        fields["data"] = body.get(response_key, fields["data"])

    return Response(raw=body, **fields)


def _block_text(soup: BeautifulSoup, classes: tuple) -> Optional[str]:
    block = soup.find(class_=lambda value: value in classes)
    if block is None:
        return None
    return _WHITESPACE.sub(" ", block.get_text(" ")).strip()


def normalize_html(text: str) -> Response:
    """Read a whostmgr HTML screen.

    Success needs an ``okmsg`` block and no ``errormsg`` block. The block's
    text becomes the message; without either block (a login page, say) the
    whole visible page text is used and the status is a failure.
    """
    soup = BeautifulSoup(text, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    error = _block_text(soup, ERROR_CLASSES)
    if error is not None:
        return Response(status=False, message=error, data=None, raw=text)
    ok = _block_text(soup, OK_CLASSES)
    if ok is not None:
        return Response(status=True, message=ok, data=None, raw=text)
    page = _WHITESPACE.sub(" ", soup.get_text(" ")).strip()
    return Response(status=False, message=page or "Unrecognized whostmgr response", data=None, raw=text)
