"""Unit tests for row/domain mappers."""

from uuid import uuid4

from quill.domain.model import Tag, TagType
from quill.persistence.mappers import (
    post_tags_to_rows,
    post_to_dict,
    row_to_post,
    rows_to_tags,
)
from tests.factories import make_post


class TestPostMappers:
    """Tests for post mapping."""

    def test_tags_keep_their_order(self):
        post = make_post(
            uuid4(),
            tags=[("b", TagType.AUDIO), ("a", TagType.DESIGN), ("c", TagType.AV)],
        )

        rows = post_tags_to_rows(post)
        restored = rows_to_tags(reversed(rows))

        assert [r["position"] for r in rows] == [0, 1, 2]
        assert restored == post.tags

    def test_row_to_post_accepts_string_ids(self):
        post = make_post(uuid4(), featured_image="cover.png")
        row = post_to_dict(post)
        row["id"] = str(row["id"])
        row["author_id"] = str(row["author_id"])

        restored = row_to_post(row, tags=[Tag(name="x", type=TagType.ESSAYS)])

        assert restored.id == post.id
        assert restored.author_id == post.author_id
        assert restored.featured_image == "cover.png"
        assert restored.tags[0].type == TagType.ESSAYS
