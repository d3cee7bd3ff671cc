from types import SimpleNamespace

from pydantic import BaseModel

from edushelf.models.components import DisplayItem
from edushelf.viewer.normalizer import metadata_value, normalize


class TestInference:
    """Field inference when no mapper is supplied."""

    def test_title_falls_back_to_name(self):
        items = normalize([{"id": 1, "name": "Dr. Elena Petrova", "role": "Mathematics"}])

        assert items[0].id == "1"
        assert items[0].title == "Dr. Elena Petrova"
        assert items[0].subtitle == "Mathematics"

    def test_title_preferred_over_name(self):
        items = normalize([{"title": "Calculus I", "name": "ignored"}])

        assert items[0].title == "Calculus I"

    def test_image_falls_back_to_avatar(self):
        items = normalize([{"avatar": "/avatars/a.png"}, {"image": "/img/b.png", "avatar": "/c.png"}])

        assert items[0].image == "/avatars/a.png"
        assert items[1].image == "/img/b.png"

    def test_image_id_is_read_from_either_spelling(self):
        items = normalize([{"imageId": "avatar-1"}, {"image_id": "avatar-2"}])

        assert [item.image_id for item in items] == ["avatar-1", "avatar-2"]

    def test_whole_record_becomes_metadata(self):
        record = {"id": "c1", "title": "Course", "level": "Beginner", "rating": 4.8}
        item = normalize([record])[0]

        assert item.metadata == record
        assert item.metadata is not record

    def test_empty_record_gets_placeholders(self):
        item = normalize([{}])[0]

        assert item.id == "item-0"
        assert item.title == "Untitled"
        assert item.subtitle is None
        assert item.image is None

    def test_blank_title_is_replaced(self):
        item = normalize([{"title": "   "}])[0]

        assert item.title == "Untitled"

    def test_non_mapping_records_never_raise(self):
        items = normalize([None, 42, "text", {"title": "ok"}])

        assert len(items) == 4
        assert all(item.title for item in items)
        assert [item.id for item in items[:3]] == ["item-0", "item-1", "item-2"]

    def test_object_records_are_read(self):
        class Course(BaseModel):
            id: str
            name: str

        items = normalize([Course(id="m1", name="From model"), SimpleNamespace(title="From object")])

        assert items[0].id == "m1"
        assert items[0].title == "From model"
        assert items[1].title == "From object"

    def test_one_item_per_record(self):
        records = [{"id": i, "title": f"Item {i}"} for i in range(25)]

        assert len(normalize(records)) == 25

    def test_none_records(self):
        assert normalize(None) == []

    def test_non_string_keys_are_stringified(self):
        item = normalize([{1: "one", "title": "Algebra"}])[0]

        assert item.title == "Algebra"
        assert item.metadata == {"1": "one", "title": "Algebra"}

    def test_unusable_image_mapping_is_dropped(self):
        items = normalize(
            [
                {"title": "a", "image": {3: "x"}},
                {"title": "b", "image": {"width": 40}},
                {"title": "c", "image": {"src": "/c.png"}},
            ]
        )

        assert [item.image for item in items] == [None, None, {"src": "/c.png"}]

    def test_unusual_values_are_coerced(self):
        items = normalize([{"id": "x", "title": {"en": "Algebra"}, "imageId": 7}, {"icon": ["a"]}])

        assert [item.id for item in items] == ["x", "item-1"]
        assert items[0].image_id == "7"


class TestMapper:
    """Caller-supplied mapper."""

    def test_display_item_is_used_verbatim(self):
        mapped = DisplayItem(id="x", title="Mapped")

        items = normalize([{"anything": True}], mapper=lambda record: mapped)

        assert items[0] is mapped

    def test_mapping_result_is_validated(self):
        items = normalize(
            [{"author": "Ada"}],
            mapper=lambda record: {"title": f"By {record['author']}", "metadata": {"k": "v"}},
        )

        assert items[0].id == "item-0"
        assert items[0].title == "By Ada"
        assert items[0].metadata == {"k": "v"}

    def test_mapper_called_once_per_record(self):
        calls = []

        def mapper(record):
            calls.append(record)
            return {"id": record["id"], "title": record["id"]}

        normalize([{"id": "a"}, {"id": "b"}], mapper=mapper)

        assert calls == [{"id": "a"}, {"id": "b"}]

    def test_raising_mapper_falls_back_to_inference(self):
        def mapper(record):
            raise KeyError("missing")

        items = normalize([{"name": "Fallback"}], mapper=mapper)

        assert items[0].title == "Fallback"

    def test_mapper_metadata_with_non_string_keys(self):
        items = normalize([{2024: "x"}], mapper=lambda record: {"title": "T", "metadata": record})

        assert len(items) == 1
        assert items[0].metadata == {"2024": "x"}

    def test_invalid_mapper_output_falls_back_to_inference(self):
        items = normalize([{"title": "Inferred"}], mapper=lambda record: ["not", "a", "mapping"])

        assert items[0].title == "Inferred"


class TestIdentifiers:
    """Item id uniqueness within a pass."""

    def test_duplicate_ids_are_suffixed(self):
        items = normalize([{"id": "a"}, {"id": "a"}, {"id": "b"}])

        assert [item.id for item in items] == ["a", "a-1", "b"]

    def test_ids_are_stable_across_passes(self):
        records = [{"id": "a"}, {"id": "a"}, {}]

        first = [item.id for item in normalize(records)]
        second = [item.id for item in normalize(records)]

        assert first == second


class TestMetadataValue:
    """Display-string access to metadata."""

    def test_values_are_strings(self):
        item = DisplayItem(id="1", metadata={"rating": 4.8, "students": 1200})

        assert metadata_value(item, "rating") == "4.8"
        assert metadata_value(item, "students") == "1200"

    def test_booleans_render_lowercase(self):
        item = DisplayItem(id="1", metadata={"isOnline": True, "archived": False})

        assert metadata_value(item, "isOnline") == "true"
        assert metadata_value(item, "archived") == "false"

    def test_missing_and_null_are_none(self):
        item = DisplayItem(id="1", metadata={"date": None})

        assert metadata_value(item, "date") is None
        assert metadata_value(item, "absent") is None
