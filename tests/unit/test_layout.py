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

from qrbatch.render.layout import (
    A4_PORTRAIT,
    CAPTION_ALLOWANCE_MM,
    LayoutConfig,
    PageSize,
    calc_columns,
    compute_geometry,
    compute_layout,
    page_count,
)


class TestCalcColumns(unittest.TestCase):
    def test_basic_calculation(self) -> None:
        # 190mm content, 35mm codes, 5mm gaps -> 190 / 40 = 4.75
        self.assertEqual(calc_columns(190, 35, 5), 4)

    def test_clamped_to_one(self) -> None:
        self.assertEqual(calc_columns(30, 40, 5), 1)
        self.assertEqual(calc_columns(-10, 40, 5), 1)


class TestLayoutConfig(unittest.TestCase):
    def test_rejects_invalid_values(self) -> None:
        cases = (
            {"code_size_mm": 0},
            {"code_size_mm": -5},
            {"gap_mm": -1},
            {"margin_mm": -0.5},
            {"code_size_mm": float("inf")},
            {"code_size_mm": float("nan")},
            {"gap_mm": float("inf")},
            {"margin_mm": float("nan")},
        )
        for kwargs in cases:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValueError):
                    LayoutConfig(**kwargs)

    def test_zero_gap_and_margin_are_allowed(self) -> None:
        config = LayoutConfig(gap_mm=0, margin_mm=0)
        self.assertEqual(config.gap_mm, 0)


class TestComputeGeometry(unittest.TestCase):
    def test_a4_defaults(self) -> None:
        geometry = compute_geometry(LayoutConfig(), A4_PORTRAIT)
        self.assertEqual(geometry.content_width, 190)
        self.assertEqual(geometry.columns, 4)
        # Row width 4*35 + 3*5 = 155, centred inside the margins.
        self.assertAlmostEqual(geometry.x_offset, 27.5)
        self.assertEqual(geometry.item_height, 35 + CAPTION_ALLOWANCE_MM)

    def test_no_caption_height(self) -> None:
        geometry = compute_geometry(LayoutConfig(show_caption=False), A4_PORTRAIT)
        self.assertEqual(geometry.item_height, 35)

    def test_recomputed_for_new_config(self) -> None:
        first = compute_geometry(LayoutConfig(code_size_mm=35), A4_PORTRAIT)
        second = compute_geometry(LayoutConfig(code_size_mm=20), A4_PORTRAIT)
        self.assertEqual(first.columns, 4)
        # 190 / 25 = 7.6
        self.assertEqual(second.columns, 7)


class TestComputeLayout(unittest.TestCase):
    def test_twelve_records_on_a4(self) -> None:
        config = LayoutConfig(code_size_mm=35, gap_mm=5, margin_mm=10, show_caption=True)
        placements = compute_layout(12, config, A4_PORTRAIT)
        self.assertEqual(len(placements), 12)
        self.assertEqual({p.page_index for p in placements}, {0})
        item_height = 35 + CAPTION_ALLOWANCE_MM
        rows = [placements[0:4], placements[4:8], placements[8:12]]
        for row_index, row in enumerate(rows):
            expected_y = 10 + row_index * (item_height + 5)
            with self.subTest(row=row_index):
                self.assertEqual([p.y for p in row], [expected_y] * 4)
                self.assertEqual([p.x for p in row], [27.5, 67.5, 107.5, 147.5])

    def test_counts_and_indices(self) -> None:
        config = LayoutConfig()
        for count in (0, 1, 3, 4, 5, 20, 21, 57):
            with self.subTest(count=count):
                placements = compute_layout(count, config, A4_PORTRAIT)
                self.assertEqual(len(placements), count)
                self.assertEqual([p.record_index for p in placements], list(range(count)))

    def test_page_break_after_five_rows(self) -> None:
        # Sixth row would start at y=250 and end at 293 > 287.
        placements = compute_layout(30, LayoutConfig(), A4_PORTRAIT)
        self.assertEqual([p.page_index for p in placements[:20]], [0] * 20)
        self.assertEqual([p.page_index for p in placements[20:]], [1] * 10)
        self.assertEqual((placements[20].x, placements[20].y), (27.5, 10))
        self.assertEqual(page_count(placements), 2)

    def test_page_break_without_caption(self) -> None:
        placements = compute_layout(29, LayoutConfig(show_caption=False), A4_PORTRAIT)
        self.assertEqual(placements[27].page_index, 0)
        self.assertEqual(placements[27].y, 250)
        self.assertEqual(placements[28].page_index, 1)

    def test_page_index_non_decreasing(self) -> None:
        placements = compute_layout(100, LayoutConfig(code_size_mm=50), A4_PORTRAIT)
        pages = [p.page_index for p in placements]
        self.assertEqual(pages[0], 0)
        self.assertEqual(pages, sorted(pages))

    def test_row_major_grid(self) -> None:
        config = LayoutConfig(code_size_mm=30, gap_mm=4, margin_mm=12, show_caption=False)
        geometry = compute_geometry(config, A4_PORTRAIT)
        placements = compute_layout(40, config, A4_PORTRAIT)
        for previous, current in zip(placements, placements[1:]):
            if current.page_index != previous.page_index:
                self.assertEqual((current.x, current.y), (geometry.x_offset, 12))
                continue
            if (previous.record_index + 1) % geometry.columns == 0:
                self.assertEqual(current.x, geometry.x_offset)
                self.assertAlmostEqual(current.y, previous.y + geometry.item_height + 4)
            else:
                self.assertEqual(current.y, previous.y)
                self.assertAlmostEqual(current.x, previous.x + 34)

    def test_deterministic(self) -> None:
        config = LayoutConfig(code_size_mm=22, gap_mm=3, margin_mm=8)
        self.assertEqual(
            compute_layout(45, config, A4_PORTRAIT),
            compute_layout(45, config, A4_PORTRAIT),
        )

    def test_degenerate_width_still_gives_one_column(self) -> None:
        # Content width 30mm cannot hold a 40mm code plus 5mm gap.
        page = PageSize(50, 297)
        config = LayoutConfig(code_size_mm=40, gap_mm=5, margin_mm=10)
        self.assertEqual(compute_geometry(config, page).columns, 1)
        placements = compute_layout(3, config, page)
        self.assertEqual(len(placements), 3)
        self.assertEqual([p.x for p in placements], [5.0, 5.0, 5.0])
        self.assertEqual([p.y for p in placements], [10, 63, 116])

    def test_item_taller_than_page_gets_one_page_each(self) -> None:
        page = PageSize(60, 40)
        config = LayoutConfig(code_size_mm=40, gap_mm=5, margin_mm=10)
        placements = compute_layout(3, config, page)
        self.assertEqual([p.page_index for p in placements], [0, 1, 2])
        self.assertEqual([p.y for p in placements], [10, 10, 10])

    def test_negative_count_rejected(self) -> None:
        with self.assertRaises(ValueError):
            compute_layout(-1, LayoutConfig(), A4_PORTRAIT)


class TestPageCount(unittest.TestCase):
    def test_empty(self) -> None:
        self.assertEqual(page_count(()), 0)

    def test_single_page(self) -> None:
        self.assertEqual(page_count(compute_layout(1, LayoutConfig(), A4_PORTRAIT)), 1)


if __name__ == "__main__":
    unittest.main()
