import os
import tempfile
import unittest
from pathlib import Path

from agen.runtime import format_actions, inspect_repo


class TestInspectRepo(unittest.TestCase):
    def test_reports_resolved_root_and_actions(self):
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "go.mod").write_text("module x\n", encoding="utf-8")
            result = inspect_repo(tmp)
        self.assertTrue(result["success"])
        self.assertEqual(result["root"], str(Path(tmp).resolve()))
        self.assertEqual([a["id"] for a in result["actions"]], ["go"])

    def test_unresolvable_root_is_empty_not_error(self):
        result = inspect_repo("bad\x00root")
        self.assertTrue(result["success"])
        self.assertEqual(result["actions"], [])
        self.assertEqual(result["root"], os.path.abspath("bad\x00root"))

    def test_unresolvable_root_in_strict_mode_reports_failure(self):
        result = inspect_repo("bad\x00root", strict=True)
        self.assertFalse(result["success"])
        self.assertEqual(result["actions"], [])
        self.assertIn("bad", result["error"])


class TestFormatActions(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(format_actions([]), "No actions detected.")

    def test_numbered_lines(self):
        text = format_actions([{"id": "go", "label": "go test", "cmd": "go test ./..."}])
        self.assertEqual(text, "Detected actions:\n1. [go] go test: go test ./...")


if __name__ == "__main__":
    unittest.main()
