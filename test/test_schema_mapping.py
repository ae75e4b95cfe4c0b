"""Tests for mapping document conversion and augmentation."""

from __future__ import annotations

import sys
import unittest
from copy import deepcopy
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SuggestShaper.core.errors import SchemaConflictError
from SuggestShaper.schema.mapping import augment_mapping, schema_from_mapping, schema_to_mapping


def _post_mapping() -> dict:
    return {
        "settings": {
            "index.max_result_window": 1000000,
            "analysis": {
                "analyzer": {
                    "default": {
                        "tokenizer": "standard",
                        "filter": ["ewp_word_delimiter", "lowercase", "stop"],
                        "language": "english",
                    },
                    "shingle_analyzer": {"type": "custom", "tokenizer": "standard", "filter": ["lowercase"]},
                },
                "filter": {"ewp_word_delimiter": {"type": "word_delimiter", "preserve_original": True}},
            },
        },
        "mappings": {
            "post": {
                "date_detection": False,
                "properties": {
                    "post_title": {
                        "type": "text",
                        "fields": {"post_title": {"type": "text", "analyzer": "standard"}, "raw": {"type": "keyword"}},
                    },
                    "post_author": {"type": "object", "properties": {"login": {"type": "keyword"}}},
                    "meta": {"properties": {"value": {"type": "text"}}},
                },
            }
        },
    }


class TestMappingCodec(unittest.TestCase):
    def test_unaugmented_round_trip_is_lossless(self) -> None:
        doc = _post_mapping()
        schema = schema_from_mapping(doc, doc_type="post")
        self.assertEqual(schema_to_mapping(schema, base=doc, doc_type="post"), doc)

    def test_object_field_without_type(self) -> None:
        schema = schema_from_mapping(_post_mapping(), doc_type="post")
        self.assertIsNone(schema.fields["meta"].type)
        self.assertIn("properties", schema.fields["meta"].extra)

    def test_typeless_mappings(self) -> None:
        doc = {"mappings": {"properties": {"title": {"type": "text"}}}}
        out = augment_mapping(doc)
        self.assertIn("term_suggest", out["mappings"]["properties"])
        self.assertIn("suggest", out["mappings"]["properties"]["title"]["fields"])

    def test_non_object_section_raises(self) -> None:
        with self.assertRaises(TypeError):
            schema_from_mapping({"mappings": ["not", "an", "object"]})


class TestAugmentMapping(unittest.TestCase):
    def test_augment_post_mapping(self) -> None:
        doc = _post_mapping()
        original = deepcopy(doc)

        out = augment_mapping(doc, title_field="post_title", doc_type="post")

        self.assertEqual(doc, original)
        props = out["mappings"]["post"]["properties"]
        self.assertEqual(
            props["post_title"]["fields"]["suggest"],
            {"type": "text", "analyzer": "edge_ngram_analyzer", "search_analyzer": "standard"},
        )
        self.assertEqual(
            props["term_suggest"],
            {"type": "text", "analyzer": "edge_ngram_analyzer", "search_analyzer": "standard"},
        )
        self.assertEqual(
            out["settings"]["analysis"]["analyzer"]["edge_ngram_analyzer"],
            {"type": "custom", "tokenizer": "standard", "filter": ["lowercase", "edge_ngram"]},
        )
        self.assertEqual(out["settings"]["analysis"]["filter"], original["settings"]["analysis"]["filter"])
        self.assertEqual(out["settings"]["index.max_result_window"], 1000000)
        self.assertFalse(out["mappings"]["post"]["date_detection"])
        self.assertEqual(props["post_author"], original["mappings"]["post"]["properties"]["post_author"])

    def test_augment_mapping_twice_is_stable(self) -> None:
        once = augment_mapping(_post_mapping(), title_field="post_title", doc_type="post")
        twice = augment_mapping(once, title_field="post_title", doc_type="post")
        self.assertEqual(twice, once)

    def test_existing_incompatible_term_suggest_raises(self) -> None:
        doc = _post_mapping()
        doc["mappings"]["post"]["properties"]["term_suggest"] = {"type": "completion"}
        with self.assertRaises(SchemaConflictError):
            augment_mapping(doc, title_field="post_title", doc_type="post")

    def test_null_settings_section_is_filled(self) -> None:
        out = augment_mapping({"settings": None, "mappings": {"post": {"properties": {}}}}, doc_type="post")
        self.assertIn("edge_ngram_analyzer", out["settings"]["analysis"]["analyzer"])
        self.assertIn("term_suggest", out["mappings"]["post"]["properties"])

    def test_null_analysis_and_mappings_sections_are_filled(self) -> None:
        out = augment_mapping({"settings": {"analysis": None}, "mappings": None}, doc_type="post")
        self.assertIn("edge_ngram_analyzer", out["settings"]["analysis"]["analyzer"])
        self.assertIn("suggest", out["mappings"]["post"]["properties"]["title"]["fields"])

        out = augment_mapping({"mappings": {"post": None}}, doc_type="post")
        self.assertIn("term_suggest", out["mappings"]["post"]["properties"])


if __name__ == "__main__":
    unittest.main()
