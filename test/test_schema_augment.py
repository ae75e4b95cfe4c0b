"""Tests for suggestion schema augmentation."""

from __future__ import annotations

import sys
import unittest
from collections.abc import Hashable
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SuggestShaper.core.errors import SchemaConflictError
from SuggestShaper.core.models import AnalyzerDefinition, Document, FieldMapping, IndexSchema
from SuggestShaper.schema.augment import (
    EDGE_NGRAM_ANALYZER,
    SUGGEST_FIELD_MAPPING,
    augment,
    missing_analyzers,
)


def _base_schema() -> IndexSchema:
    return IndexSchema(
        fields={
            "title": FieldMapping(
                type="text",
                analyzer="default",
                fields={"raw": FieldMapping(type="keyword", extra={"ignore_above": 10922})},
            ),
            "content": FieldMapping(type="text"),
            "post_date": FieldMapping(type="date", analyzer=None, extra={"format": "yyyy-MM-dd HH:mm:ss"}),
        },
        analyzers={
            "default": AnalyzerDefinition(tokenizer="standard", filters=("lowercase", "stop")),
        },
    )


class TestAugment(unittest.TestCase):
    def test_adds_suggest_fields_and_analyzer(self) -> None:
        result = augment(_base_schema())

        self.assertEqual(result.fields["title"].fields["suggest"], SUGGEST_FIELD_MAPPING)
        self.assertEqual(result.fields["term_suggest"], SUGGEST_FIELD_MAPPING)
        self.assertEqual(result.analyzers["edge_ngram_analyzer"], EDGE_NGRAM_ANALYZER)
        self.assertEqual(result.analyzers["edge_ngram_analyzer"].tokenizer, "standard")
        self.assertEqual(result.analyzers["edge_ngram_analyzer"].filters, ("lowercase", "edge_ngram"))
        self.assertEqual(result.fields["term_suggest"].analyzer, "edge_ngram_analyzer")
        self.assertEqual(result.fields["term_suggest"].search_analyzer, "standard")

    def test_idempotent(self) -> None:
        once = augment(_base_schema())
        twice = augment(once)
        self.assertEqual(twice, once)
        self.assertEqual(list(twice.analyzers), list(once.analyzers))
        self.assertEqual(list(twice.fields), list(once.fields))

    def test_additive_keeps_base_entries(self) -> None:
        base = _base_schema()
        result = augment(base)

        for name, mapping in base.fields.items():
            if name == "title":
                continue
            self.assertEqual(result.fields[name], mapping)
        for name, analyzer in base.analyzers.items():
            self.assertEqual(result.analyzers[name], analyzer)

        title = result.fields["title"]
        self.assertEqual(title.analyzer, "default")
        self.assertEqual(title.fields["raw"], base.fields["title"].fields["raw"])
        self.assertEqual(list(result.fields)[:3], ["title", "content", "post_date"])

    def test_does_not_mutate_input(self) -> None:
        base = _base_schema()
        augment(base)
        self.assertNotIn("term_suggest", base.fields)
        self.assertNotIn("suggest", base.fields["title"].fields)
        self.assertNotIn("edge_ngram_analyzer", base.analyzers)

    def test_missing_title_field_is_created(self) -> None:
        result = augment(IndexSchema())
        self.assertEqual(result.fields["title"].type, "text")
        self.assertIn("suggest", result.fields["title"].fields)

    def test_custom_title_field(self) -> None:
        base = IndexSchema(fields={"post_title": FieldMapping(type="text")})
        result = augment(base, title_field="post_title")
        self.assertIn("suggest", result.fields["post_title"].fields)
        self.assertNotIn("title", result.fields)

    def test_conflicting_term_suggest_raises(self) -> None:
        base = IndexSchema(fields={"term_suggest": FieldMapping(type="keyword")})
        with self.assertRaises(SchemaConflictError) as ctx:
            augment(base)
        self.assertEqual(ctx.exception.name, "term_suggest")

    def test_conflicting_suggest_subfield_raises(self) -> None:
        base = IndexSchema(
            fields={"title": FieldMapping(type="text", fields={"suggest": FieldMapping(type="completion")})}
        )
        with self.assertRaisesRegex(SchemaConflictError, "title\\.suggest"):
            augment(base)

    def test_conflicting_analyzer_raises(self) -> None:
        base = IndexSchema(
            analyzers={"edge_ngram_analyzer": AnalyzerDefinition(tokenizer="whitespace", filters=("edge_ngram",))}
        )
        with self.assertRaisesRegex(SchemaConflictError, "edge_ngram_analyzer"):
            augment(base)

    def test_conflict_error_is_value_error(self) -> None:
        base = IndexSchema(fields={"term_suggest": FieldMapping(type="keyword")})
        with self.assertRaises(ValueError):
            augment(base)


class TestMissingAnalyzers(unittest.TestCase):
    def test_augmented_schema_has_no_missing_analyzers(self) -> None:
        self.assertEqual(missing_analyzers(augment(_base_schema())), ())

    def test_reports_unregistered_names_once(self) -> None:
        schema = IndexSchema(
            fields={
                "a": FieldMapping(analyzer="custom_one"),
                "b": FieldMapping(analyzer="custom_one", search_analyzer="standard"),
                "c": FieldMapping(fields={"x": FieldMapping(analyzer="custom_two")}),
            }
        )
        self.assertEqual(missing_analyzers(schema), ("custom_one", "custom_two"))


class TestSchemaValues(unittest.TestCase):
    def test_values_compare_by_content_but_are_unhashable(self) -> None:
        values = [
            (FieldMapping(type="keyword"), FieldMapping(type="keyword")),
            (EDGE_NGRAM_ANALYZER, AnalyzerDefinition(tokenizer="standard", filters=["lowercase", "edge_ngram"])),
            (IndexSchema(fields={"title": FieldMapping()}), IndexSchema(fields={"title": FieldMapping()})),
            (Document(id=1, fields={"a": 1}), Document(id=1, fields={"a": 1})),
        ]
        for left, right in values:
            with self.subTest(type=type(left).__name__):
                self.assertEqual(left, right)
                self.assertNotIsInstance(left, Hashable)
                with self.assertRaises(TypeError):
                    hash(left)


if __name__ == "__main__":
    unittest.main()
