#!/usr/bin/env python3
"""
Tests for bill version records and the section diff model.
"""
import unittest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from billdiff.errors import MalformedInput
from billdiff.models.bill_version import BillSection, BillVersion
from billdiff.models.section_diff import ContentKind, Relation, SectionDiff, Span, SpanTag


class TestBillSection(unittest.TestCase):

    def test_null_fields_coerced(self):
        section = BillSection(id="s1", title=None, content=None)
        self.assertEqual(section.title, "")
        self.assertEqual(section.content, "")

    def test_from_dict(self):
        section = BillSection.from_dict({"id": 7, "title": "Sec. 7", "content": None, "extra": "ignored"})
        self.assertEqual(section, BillSection(id="7", title="Sec. 7", content=""))

    def test_from_dict_rejects_missing_id(self):
        with self.assertRaises(MalformedInput):
            BillSection.from_dict({"title": "No id"})
        with self.assertRaises(MalformedInput):
            BillSection.from_dict({"id": "  ", "title": "Blank id"})

    def test_from_dict_rejects_non_mapping(self):
        with self.assertRaises(MalformedInput) as ctx:
            BillSection.from_dict("Sec. 1")
        self.assertEqual(ctx.exception.record, "Sec. 1")
        # MalformedInput is also a ValueError
        self.assertIsInstance(ctx.exception, ValueError)


class TestBillVersion(unittest.TestCase):

    def setUp(self):
        self.record = {
            "id": "v2",
            "name": "Engrossed",
            "status": "Passed House",
            "date": "2025-03-14",
            "sections": [
                {"id": "s1", "title": "Sec. 1", "content": "Short title."},
                {"id": "s2", "title": None, "content": "Definitions."},
            ],
        }

    def test_from_dict(self):
        version = BillVersion.from_dict(self.record)
        self.assertEqual(version.id, "v2")
        self.assertEqual(version.name, "Engrossed")
        self.assertEqual(version.date, "2025-03-14")
        self.assertEqual(version.status, "Passed House")
        self.assertEqual(version.section_ids, ("s1", "s2"))
        self.assertEqual(version.sections[1].title, "")

    def test_missing_sections_is_empty(self):
        version = BillVersion.from_dict({"id": "v1", "name": "Introduced", "sections": None})
        self.assertEqual(version.sections, ())
        self.assertIsNone(version.date)

    def test_duplicate_section_ids_keep_first(self):
        self.record["sections"].append({"id": "s1", "title": "Dup", "content": "Later copy"})
        with self.assertLogs('billdiff.models.bill_version', level='WARNING'):
            version = BillVersion.from_dict(self.record)
        self.assertEqual(version.section_ids, ("s1", "s2"))
        self.assertEqual(version.sections[0].content, "Short title.")

    def test_bad_sections_rejected(self):
        self.record["sections"] = "not a list"
        with self.assertRaises(MalformedInput):
            BillVersion.from_dict(self.record)

    def test_bad_section_record_rejected(self):
        self.record["sections"].append(None)
        with self.assertRaises(MalformedInput):
            BillVersion.from_dict(self.record)

    def test_sections_list_stored_as_tuple(self):
        version = BillVersion(id="v1", name="Introduced", sections=[BillSection("s1", "Sec. 1", "x")])
        self.assertIsInstance(version.sections, tuple)

    def test_round_trip_through_dict(self):
        version = BillVersion.from_dict(self.record)
        self.assertEqual(BillVersion.from_dict(version.to_dict()), version)


class TestSectionDiff(unittest.TestCase):

    def test_requires_exactly_one_payload(self):
        with self.assertRaises(ValueError):
            SectionDiff(id="s1", left_title="A", right_title="A",
                        relation=Relation.MODIFIED, content_kind=ContentKind.PLAIN_TEXT)
        with self.assertRaises(ValueError):
            SectionDiff(id="s1", left_title="A", right_title="A",
                        relation=Relation.MODIFIED, content_kind=ContentKind.PLAIN_TEXT,
                        spans=(), single_content="x")

    def test_title_prefers_right(self):
        diff = SectionDiff(id="s1", left_title="Old", right_title="New",
                           relation=Relation.UNCHANGED, content_kind=ContentKind.PLAIN_TEXT,
                           single_content="x")
        self.assertEqual(diff.title, "New")
        removed = SectionDiff(id="s2", left_title="Gone", right_title=None,
                              relation=Relation.ONLY_IN_LEFT, content_kind=ContentKind.PLAIN_TEXT,
                              single_content="y")
        self.assertEqual(removed.title, "Gone")

    def test_to_dict_with_html_contents(self):
        diff = SectionDiff(id="s1", left_title="A", right_title="A",
                           relation=Relation.MODIFIED, content_kind=ContentKind.HTML,
                           single_content="<p>b</p>", left_content="<p>a</p>", right_content="<p>b</p>")
        data = diff.to_dict()
        self.assertEqual(data["content_kind"], "html")
        self.assertEqual(data["left_content"], "<p>a</p>")
        self.assertNotIn("spans", data)
        self.assertTrue(diff.is_degraded)

    def test_spans_stored_as_tuple(self):
        diff = SectionDiff(id="s1", left_title="A", right_title="A",
                           relation=Relation.MODIFIED, content_kind=ContentKind.PLAIN_TEXT,
                           spans=[Span("a", SpanTag.REMOVED)])
        self.assertEqual(diff.spans, (Span("a", SpanTag.REMOVED),))
        self.assertEqual(diff.to_dict()["spans"], [{"text": "a", "tag": "removed"}])


if __name__ == '__main__':
    unittest.main()
