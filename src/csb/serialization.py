"""
Serialization helpers for CSB objects and plain values.

Selectors round-trip through an intermediate dict representation to
JSON/YAML. Loading a compound selector replays each fragment through the
builder, so a document describing an invalid chain fails exactly like the
chain itself would.

get_json/from_json are generic: any value to compact JSON, and JSON back
onto an instance of a given class.
"""
from __future__ import annotations

import json
import math
from typing import Any, Dict, Type, TypeVar

import yaml

from csb.fragments import Fragment, FragmentKind
from csb.model import CompositeSelector, Selector, SelectorBuilder

T = TypeVar("T")


def fragment_to_dict(f: Fragment) -> Dict[str, Any]:
    return {"kind": f.kind.label, "value": f.value}


def fragment_from_dict(d: Dict[str, Any]) -> Fragment:
    if not isinstance(d, dict):
        raise TypeError(f"Expected a fragment mapping, got {type(d).__name__}")
    missing = {"kind", "value"} - set(d)
    if missing:
        raise TypeError(f"Fragment dict missing keys: {sorted(missing)}")
    return Fragment(kind=FragmentKind.from_label(d["kind"]), value=d["value"])


def selector_to_dict(s: Selector) -> Dict[str, Any]:
    if isinstance(s, SelectorBuilder):
        return {
            "type": "compound",
            "fragments": [fragment_to_dict(f) for f in s.fragments],
        }
    if isinstance(s, CompositeSelector):
        return {"type": "composite", "text": s.stringify()}
    raise TypeError(f"Unsupported Selector type: {type(s)}")


def selector_from_dict(d: Dict[str, Any]) -> Selector:
    if not isinstance(d, dict):
        raise TypeError(f"Expected a selector mapping, got {type(d).__name__}")
    t = d.get("type")
    if t == "compound":
        fragments = d.get("fragments", [])
        if not isinstance(fragments, list):
            raise TypeError(f"Expected a fragment list, got {type(fragments).__name__}")
        builder = SelectorBuilder()
        for fd in fragments:
            builder.add(fragment_from_dict(fd))
        return builder
    if t == "composite":
        if not isinstance(d.get("text"), str):
            raise TypeError("Composite selector dict needs a 'text' string")
        return CompositeSelector(d["text"])
    raise TypeError(f"Unsupported selector dict type: {t}")


def selector_to_json(s: Selector) -> str:
    return json.dumps(selector_to_dict(s), sort_keys=True)


def selector_from_json(s: str) -> Selector:
    d = json.loads(s)
    return selector_from_dict(d)


def selector_to_yaml(s: Selector) -> str:
    return yaml.safe_dump(selector_to_dict(s))


def selector_from_yaml(s: str) -> Selector:
    d = yaml.safe_load(s)
    return selector_from_dict(d)


def _finite(value: Any) -> Any:
    # NaN and infinities have no JSON form; they become null.
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def _object_to_dict(obj: Any) -> Dict[str, Any]:
    # Instance attributes only; methods are never serialized.
    try:
        return _finite(vars(obj))
    except TypeError:
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable") from None


def get_json(value: Any) -> str:
    """
    Serialize a value to compact JSON.

    Examples:
        [1, 2, 3]                        => '[1,2,3]'
        {"width": 10, "height": 20}      => '{"width":10,"height":20}'
        Rectangle(10, 20)                => '{"width":10,"height":20}'
        float("nan")                     => 'null'

    Mapping keys keep insertion order. Non-finite floats are written as
    null, so the output is always strict JSON.
    """
    return json.dumps(
        _finite(value), separators=(",", ":"), default=_object_to_dict, allow_nan=False
    )


def from_json(cls: Type[T], text: str) -> T:
    """
    Parse JSON and attach the result to a new instance of cls.

    __init__ is not called and the data is not checked against the class;
    attributes are copied as parsed, after which the class's methods work
    on them.

        r = from_json(Rectangle, '{"width":10,"height":20}')
        r.area()  # 200
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    obj = cls.__new__(cls)
    # Works for plain, frozen and slotted classes alike.
    for key, value in data.items():
        try:
            object.__setattr__(obj, key, value)
        except AttributeError:
            raise TypeError(f"{cls.__name__} has no slot for {key!r}") from None
    return obj
