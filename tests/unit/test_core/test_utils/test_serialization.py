"""
Unit tests for serialization utilities.
"""
# 说明：序列化与敏感字段掩码相关工具的单元测试。
# 覆盖：
# - mask_sensitive_data：对指定键进行掩码替换且不修改原字典
# - serialize_to_json / deserialize_from_json：支持 to_dict 对象（Region）与版本包装
# - VersionedPayload：带 version + payload 结构的序列化/反序列化一致性与缺字段报错

import pytest

from reasonlib.core.distribution import Region
from reasonlib.core.utils import (
    VersionedPayload,
    deserialize_from_json,
    mask_sensitive_data,
    serialize_to_json,
)


def test_mask_sensitive_data() -> None:
    payload = {"node_id": 1, "content": "value"}
    masked = mask_sensitive_data(payload, ["content"])
    assert masked["content"] == "***"
    assert payload["content"] == "value"


def test_serialize_region_uses_to_dict() -> None:
    text = serialize_to_json(Region(0.0, 1.0, 0.25), version="1")
    data = deserialize_from_json(text)
    assert data["version"] == "1"
    assert data["payload"] == {"lower_bound": 0.0, "upper_bound": 1.0, "probability": 0.25}


def test_versioned_payload_roundtrip() -> None:
    payload = VersionedPayload(version="2", payload={"foo": "bar"})
    restored = VersionedPayload.from_json(payload.to_json())
    assert restored.version == "2"
    assert restored.payload["foo"] == "bar"


def test_versioned_payload_missing_fields() -> None:
    with pytest.raises(ValueError):
        VersionedPayload.from_json('{"payload": {}}')


def test_versioned_payload_rejects_non_object_json() -> None:
    # from_json 经由 deserialize_from_json 解码，顶层必须是对象
    with pytest.raises(ValueError):
        VersionedPayload.from_json('["version", "payload"]')
