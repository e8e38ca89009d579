from typing import Any, Mapping, Optional


def key_label(key: Optional[str], shift: bool = False, ctrl: bool = False, alt: bool = False) -> str:
    """Display name for a keydown: Space, then held modifiers, then the key itself."""
    if key == " ":
        return "Space"
    if shift:
        return "Shift"
    if ctrl:
        return "Ctrl"
    if alt:
        return "Alt"
    return str(key or "")


def key_label_from_payload(payload: Any) -> Optional[str]:
    """Turn a keydown payload from the browser bridge into a label.

    Returns None for anything that is not a keydown payload (the bridge
    reports 0 or None until a key is pressed).
    """
    if not isinstance(payload, Mapping) or "key" not in payload:
        return None
    return key_label(
        payload.get("key"),
        shift=bool(payload.get("shift")),
        ctrl=bool(payload.get("ctrl")),
        alt=bool(payload.get("alt")),
    )
