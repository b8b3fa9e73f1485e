"""Tests for chunk file loading."""

import pytest

from date_reaper.core.chunk_loader import load_chunk
from date_reaper.exceptions import ChunkLoadError
from date_reaper.models.chunk import Variant


class TestLoadChunk:
    def test_loads_variants(self, tmp_path):
        path = tmp_path / "chunk.yaml"
        path.write_text(
            "variants:\n"
            "  - name: '18'\n"
            "    args:\n"
            "      image: node:18-alpine\n"
            "  - name: '20'\n",
            encoding="utf-8",
        )

        chunk = load_chunk(path)

        assert chunk.variants == [
            Variant("18", {"image": "node:18-alpine"}),
            Variant("20", {}),
        ]

    def test_unquoted_scalars_keep_their_text(self, tmp_path):
        path = tmp_path / "chunk.yaml"
        path.write_text(
            "variants:\n"
            "  - name: 3.10\n"
            "    args:\n"
            "      port: 08\n"
            "      debug: on\n"
            "  - name: 1.20\n"
            "  - name: on\n",
            encoding="utf-8",
        )

        chunk = load_chunk(path)

        assert [v.name for v in chunk.variants] == ["3.10", "1.20", "on"]
        assert chunk.variants[0].args == {"port": "08", "debug": "on"}

    def test_empty_variants_and_args(self, tmp_path):
        path = tmp_path / "chunk.yaml"
        path.write_text("variants:\n  - name: '18'\n    args:\n", encoding="utf-8")

        assert load_chunk(path).variants == [Variant("18", {})]

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "chunk.yaml"
        path.write_bytes(b"\xff\xfe")

        with pytest.raises(ChunkLoadError, match="not valid UTF-8"):
            load_chunk(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "chunk.yaml"
        path.write_text("", encoding="utf-8")

        assert load_chunk(path).variants == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ChunkLoadError, match="Error loading chunk file"):
            load_chunk(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "chunk.yaml"
        path.write_text("variants: [\n", encoding="utf-8")

        with pytest.raises(ChunkLoadError, match="invalid YAML"):
            load_chunk(path)

    def test_top_level_list_rejected(self, tmp_path):
        path = tmp_path / "chunk.yaml"
        path.write_text("- name: '18'\n", encoding="utf-8")

        with pytest.raises(ChunkLoadError, match="top level must be a mapping"):
            load_chunk(path)

    def test_bad_variant_reported_with_path(self, tmp_path):
        path = tmp_path / "chunk.yaml"
        path.write_text("variants:\n  - args: {}\n", encoding="utf-8")

        with pytest.raises(ChunkLoadError) as exc_info:
            load_chunk(path)
        assert exc_info.value.path == str(path)
