# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import unittest

from qrbatch.core.errors import FieldNameError
from qrbatch.core.models import (
    FieldSchema,
    add_field,
    add_field_checked,
    append_record,
    clear_records,
    manual_record,
    set_schema,
)


class TestFieldSchema(unittest.TestCase):
    def test_duplicate_names_rejected(self) -> None:
        with self.assertRaises(ValueError):
            FieldSchema(("ID", "ID"))

    def test_sequence_behaviour(self) -> None:
        schema = FieldSchema(("ID", "Name"))
        self.assertEqual(len(schema), 2)
        self.assertEqual(list(schema), ["ID", "Name"])
        self.assertIn("Name", schema)
        self.assertEqual(schema.first, "ID")
        self.assertIsNone(FieldSchema().first)


class TestAddField(unittest.TestCase):
    def test_appends_new_name(self) -> None:
        schema = add_field(FieldSchema(("ID", "Name")), "SKU")
        self.assertEqual(schema.fields, ("ID", "Name", "SKU"))

    def test_name_is_stripped(self) -> None:
        self.assertEqual(add_field(FieldSchema(), "  SKU ").fields, ("SKU",))

    def test_blank_and_duplicate_ignored(self) -> None:
        schema = FieldSchema(("ID", "Name"))
        for name in ("", "   ", "ID", " Name "):
            with self.subTest(name=name):
                self.assertIs(add_field(schema, name), schema)

    def test_repeated_add_is_idempotent(self) -> None:
        schema = FieldSchema(("ID",))
        once = add_field(schema, "SKU")
        twice = add_field(once, "SKU")
        self.assertEqual(once, twice)

    def test_checked_variant_reports_reason(self) -> None:
        schema = FieldSchema(("ID",))
        with self.assertRaises(FieldNameError) as ctx:
            add_field_checked(schema, "")
        self.assertIn("empty", str(ctx.exception))
        with self.assertRaises(FieldNameError) as ctx:
            add_field_checked(schema, "ID")
        self.assertIn("already exists", str(ctx.exception))

    def test_field_name_error_is_value_error(self) -> None:
        self.assertTrue(issubclass(FieldNameError, ValueError))


class TestSetSchema(unittest.TestCase):
    def test_replaces_and_keeps_order(self) -> None:
        self.assertEqual(set_schema(["B", "A", "B", "C"]).fields, ("B", "A", "C"))


class TestRecords(unittest.TestCase):
    def test_append_and_clear(self) -> None:
        records = append_record((), {"ID": "1"})
        records = append_record(records, {"ID": "2"})
        self.assertEqual([r["ID"] for r in records], ["1", "2"])
        self.assertEqual(clear_records(), ())

    def test_append_copies_record(self) -> None:
        source = {"ID": "1"}
        records = append_record((), source)
        source["ID"] = "changed"
        self.assertEqual(records[0]["ID"], "1")


class TestManualRecord(unittest.TestCase):
    def test_keeps_filled_schema_fields(self) -> None:
        schema = FieldSchema(("ID", "Name", "SKU"))
        record = manual_record(schema, {"ID": "1", "Name": " ", "SKU": "A-7", "Extra": "x"})
        self.assertEqual(record, {"ID": "1", "SKU": "A-7"})

    def test_nothing_filled_gives_none(self) -> None:
        schema = FieldSchema(("ID", "Name"))
        self.assertIsNone(manual_record(schema, {}))
        self.assertIsNone(manual_record(schema, {"ID": "", "Name": None}))


if __name__ == "__main__":
    unittest.main()
