# tests/property/test_object_properties.py
"""Property-based tests for framing and content addressing.

These verify the invariants every stored object relies on:
- Decoding an encoded frame gives back kind, true length and payload
- Addresses depend only on (kind, payload)
- The store round-trips arbitrary binary payloads
"""

import tempfile
from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

from odb.core.codec import decode_frame, encode_frame, hash_frame
from odb.core.object_store import FilesystemObjectStore, fanout_path

# Kinds may be any ASCII text without space or NUL
kinds = st.text(
    alphabet=st.characters(min_codepoint=0x21, max_codepoint=0x7E),
    min_size=1,
    max_size=12,
)
payloads = st.binary(max_size=4096)
addresses = st.text(alphabet="0123456789abcdef", min_size=40, max_size=40)


class TestFrameProperties:
    @given(kind=kinds, payload=payloads)
    def test_decode_inverts_encode(self, kind: str, payload: bytes) -> None:
        obj = decode_frame(encode_frame(kind, payload))

        assert obj.kind == kind
        assert obj.size == str(len(payload))
        assert obj.declared_size == len(payload)
        assert obj.payload == payload

    @given(kind=kinds, payload=payloads)
    def test_to_frame_rebuilds_original_bytes(self, kind: str, payload: bytes) -> None:
        frame = encode_frame(kind, payload)

        assert decode_frame(frame).to_frame() == frame

    @given(kind=kinds, payload=payloads)
    def test_address_is_deterministic(self, kind: str, payload: bytes) -> None:
        first = hash_frame(encode_frame(kind, payload))
        second = hash_frame(encode_frame(kind, bytes(payload)))

        assert first == second
        assert decode_frame(encode_frame(kind, payload)).address == first

    @given(
        a=st.tuples(kinds, payloads),
        b=st.tuples(kinds, payloads),
    )
    def test_distinct_objects_have_distinct_addresses(
        self, a: tuple[str, bytes], b: tuple[str, bytes]
    ) -> None:
        if a != b:
            assert hash_frame(encode_frame(*a)) != hash_frame(encode_frame(*b))


class TestFanoutProperties:
    @given(address=addresses)
    def test_split_is_two_then_thirty_eight(self, address: str) -> None:
        root = Path("/store")
        path = fanout_path(root, address)

        assert path.parent.parent == root / "objects"
        assert path.parent.name == address[:2]
        assert path.name == address[2:]
        assert path.parent.name + path.name == address


class TestStoreProperties:
    @given(kind=kinds, payload=payloads)
    def test_store_round_trip(self, kind: str, payload: bytes) -> None:
        # tmp_path is function-scoped and not reset between examples
        with tempfile.TemporaryDirectory() as tmp:
            store = FilesystemObjectStore(Path(tmp))
            address = store.put(encode_frame(kind, payload))
            obj = store.read_object(store.path_for(address))

        assert (obj.kind, obj.size, obj.payload) == (kind, str(len(payload)), payload)
