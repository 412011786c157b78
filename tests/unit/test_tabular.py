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

import tempfile
import unittest
from pathlib import Path

from openpyxl import Workbook

from qrbatch.core.errors import IngestError
from qrbatch.ingest.tabular import read_table, rows_to_records


class TestRowsToRecords(unittest.TestCase):
    def test_empty_table(self) -> None:
        schema, records = rows_to_records([])
        self.assertEqual(schema.fields, ())
        self.assertEqual(records, ())

    def test_header_only(self) -> None:
        schema, records = rows_to_records([["ID", "Name"]])
        self.assertEqual(schema.fields, ("ID", "Name"))
        self.assertEqual(records, ())

    def test_blank_and_duplicate_headers(self) -> None:
        rows = [
            ["ID", "", "Name", "Name", None, "Name"],
            ["1", "skip", "a", "b", "skip", "c"],
        ]
        schema, records = rows_to_records(rows)
        self.assertEqual(schema.fields, ("ID", "Name", "Name_1", "Name_2"))
        self.assertEqual(records[0], {"ID": "1", "Name": "a", "Name_1": "b", "Name_2": "c"})

    def test_empty_cells_and_rows(self) -> None:
        rows = [
            ["ID", "Name"],
            ["1", "  "],
            ["", None],
            ["  2 ", "Gadget"],
            ["3"],
        ]
        _schema, records = rows_to_records(rows)
        self.assertEqual(records, ({"ID": "1"}, {"ID": "2", "Name": "Gadget"}, {"ID": "3"}))


class TestReadTable(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmpdir = Path(self._tmp.name)

    def _write(self, name: str, content: str, encoding: str = "utf-8") -> Path:
        path = self.tmpdir / name
        path.write_text(content, encoding=encoding)
        return path

    def test_csv_keeps_row_and_column_order(self) -> None:
        path = self._write("items.csv", "Name,ID\nWidget,1\nGadget,2\nGizmo,3\n")
        schema, records = read_table(path)
        self.assertEqual(schema.fields, ("Name", "ID"))
        self.assertEqual([r["Name"] for r in records], ["Widget", "Gadget", "Gizmo"])
        self.assertEqual(list(records[0].keys()), ["Name", "ID"])

    def test_csv_with_bom(self) -> None:
        path = self._write("bom.csv", "ID,Name\n1,Widget\n", encoding="utf-8-sig")
        schema, _records = read_table(path)
        self.assertEqual(schema.fields, ("ID", "Name"))

    def test_semicolon_delimiter(self) -> None:
        path = self._write("semi.csv", "ID;Name;Price\n1;Widget;10\n2;Gadget;12\n")
        schema, records = read_table(path)
        self.assertEqual(schema.fields, ("ID", "Name", "Price"))
        self.assertEqual(records[1], {"ID": "2", "Name": "Gadget", "Price": "12"})

    def test_empty_csv(self) -> None:
        path = self._write("empty.csv", "")
        schema, records = read_table(path)
        self.assertEqual(len(schema), 0)
        self.assertEqual(records, ())

    def test_xlsx_first_sheet(self) -> None:
        workbook = Workbook()
        sheet = workbook.active
        sheet.append(["ID", "Name", None])
        sheet.append([1, "Widget", None])
        sheet.append([None, None, None])
        sheet.append([2, "Gadget", None])
        other = workbook.create_sheet("Other")
        other.append(["ignored"])
        path = self.tmpdir / "items.xlsx"
        workbook.save(path)

        schema, records = read_table(path)
        self.assertEqual(schema.fields, ("ID", "Name"))
        self.assertEqual(records, ({"ID": 1, "Name": "Widget"}, {"ID": 2, "Name": "Gadget"}))

    def test_unsupported_suffix(self) -> None:
        for name in ("items.txt", "legacy.xls"):
            with self.subTest(name=name):
                path = self._write(name, "ID\n1\n")
                with self.assertRaises(IngestError) as ctx:
                    read_table(path)
                self.assertIn("unsupported", str(ctx.exception))
                self.assertIn(".xlsx", str(ctx.exception))

    def test_missing_file(self) -> None:
        with self.assertRaises(IngestError) as ctx:
            read_table(self.tmpdir / "missing.csv")
        self.assertIn("not found", str(ctx.exception))

    def test_directory_is_rejected(self) -> None:
        folder = self.tmpdir / "folder.csv"
        folder.mkdir()
        with self.assertRaises(IngestError):
            read_table(folder)

    def test_corrupt_spreadsheet(self) -> None:
        path = self.tmpdir / "broken.xlsx"
        path.write_bytes(b"not a zip archive")
        with self.assertRaises(IngestError) as ctx:
            read_table(path)
        self.assertIn("could not open spreadsheet", str(ctx.exception))

    def test_ingest_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            read_table(self.tmpdir / "missing.csv")


if __name__ == "__main__":
    unittest.main()
