"""Tests for Pygments JSON colorizing."""

from __future__ import annotations

import unittest

from sidebar_builder.highlight import colorize_json


class ColorizeJsonTests(unittest.TestCase):
    def test_output_contains_ansi_codes_and_original_text(self) -> None:
        colored = colorize_json('{"text": "Guide", "order": 1}')

        self.assertIn("\033[", colored)
        self.assertIn("Guide", colored)

    def test_unknown_style_falls_back(self) -> None:
        colored = colorize_json('{"order": 1}', style="no-such-style")

        self.assertIn("order", colored)


if __name__ == "__main__":
    unittest.main()
