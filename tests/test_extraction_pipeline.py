import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from pipeline.orchestrator import run_extraction, show_baseline
from pipeline.wiring import build_config
from ts_baselines.io.layout import BaselineLayoutError, BaselineReadError
from ts_baselines.report import COMPACT_HEADER

BAR = """\
bar.ts(1,1): error TS2304: Cannot find name 'x'.


==== bar.ts (1 errors) ====
    x;
    ~
!!! error TS2304: Cannot find name 'x'.
"""

BAR_ES5 = """\
bar.ts(1,1): error TS2304: Cannot find name 'x'.
bar.ts(2,5): error TS1005: ';' expected.


==== bar.ts (2 errors) ====
    x;
    ~
!!! error TS2304: Cannot find name 'x'.
    let a b;
        ~
!!! error TS1005: ';' expected.
"""


def make_ts_repo(root: Path) -> Path:
    """Create a tiny TypeScript checkout with both kinds of tests."""
    cases = root / "tests" / "cases"
    ref = root / "tests" / "baselines" / "reference"

    files = {
        # Expected to parse: no baseline at all.
        cases / "compiler" / "foo.ts": "let ok = 1;\n",
        cases / "compiler" / "bar.ts": "x;\n",
        cases / "conformance" / "es6" / "quux.es6.ts": "class C {}\n",
        cases / "fourslash" / "skipped.ts": "",
        ref / "bar.errors.txt": BAR,
        ref / "bar(target=es5).errors.txt": BAR_ES5,
        ref / "bar(strict=true).errors.txt": "error TS7006: Parameter 'a' implicitly has an 'any' type.\n",
        ref / "quux.errors.txt": "no diagnostics mentioned here\n",
        ref / "orphan.errors.txt": "error TS2322: Type 'string' is not assignable to type 'number'.\n",
        ref / "skipped.errors.txt": "error TS2551: Property 'x' does not exist.\n",
        ref / "project" / "bar" / "bar.errors.txt": "error TS5055: Cannot write file.\n",
        ref / "bar.js": "x;\n",
    }
    for path, text in files.items():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


def _quiet(fn, *args, **kwargs):
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        result = fn(*args, **kwargs)
    return result, buf.getvalue()


class TestRunExtraction(unittest.TestCase):
    def test_end_to_end_compact(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            ts_repo = make_ts_repo(root / "TypeScript")
            out_dir = root / "out"
            cfg = build_config(environ={}, ts_repo_dir=str(ts_repo), output_dir=str(out_dir))

            result, stdout = _quiet(run_extraction, cfg)

            self.assertEqual(6, result.baseline_count)
            self.assertEqual(3, result.test_file_count)
            self.assertEqual(
                ["bar.errors.txt", "bar(target=es5).errors.txt", "quux.errors.txt"],
                result.target_baselines,
            )
            self.assertEqual([1005, 2304], result.index.sorted_codes())
            self.assertEqual(
                ["bar.errors.txt", "bar(target=es5).errors.txt"],
                result.index.files_for(2304),
            )
            self.assertEqual(["bar(target=es5).errors.txt"], result.index.files_for(1005))
            self.assertEqual(2, result.code_count)

            self.assertEqual(out_dir / "diagnostic-error-codes.txt", result.output_path)
            text = result.output_path.read_text(encoding="utf-8")
            self.assertEqual("\n".join([*COMPACT_HEADER, "1005", "2304"]), text)

            self.assertIn("Found 6 files.", stdout)
            self.assertIn("Found 3 `.errors.txt` files to be checked.", stdout)
            self.assertIn("Extracted 2 unique diagnostic error codes", stdout)
            self.assertIn(f"Saved the output to {result.output_path}", stdout)

    def test_end_to_end_verbose(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            ts_repo = make_ts_repo(root / "TypeScript")
            cfg = build_config(
                environ={"DEBUG": "1"},
                ts_repo_dir=str(ts_repo),
                output_dir=str(root / "out"),
            )

            result, _ = _quiet(run_extraction, cfg)

            self.assertEqual(root / "out" / "diagnostic-error-codes.json", result.output_path)
            data = json.loads(result.output_path.read_text(encoding="utf-8"))
            self.assertEqual(
                {
                    "1005": ["bar(target=es5).errors.txt"],
                    "2304": ["bar(target=es5).errors.txt", "bar.errors.txt"],
                },
                data,
            )

    def test_unreadable_baseline_aborts_without_artifact(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            ts_repo = make_ts_repo(root / "TypeScript")
            ref = ts_repo / "tests" / "baselines" / "reference"
            (ref / "quux.errors.txt").write_bytes(b"\xff\xfe error TS2304: \xfa")
            out_dir = root / "out"
            cfg = build_config(environ={}, ts_repo_dir=str(ts_repo), output_dir=str(out_dir))

            with self.assertRaises(BaselineReadError) as ctx:
                _quiet(run_extraction, cfg)

            self.assertEqual("quux.errors.txt", ctx.exception.rel_path)
            self.assertFalse((out_dir / "diagnostic-error-codes.txt").exists())

    def test_missing_checkout_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg = build_config(
                environ={}, ts_repo_dir=str(Path(td) / "nope"), output_dir=str(Path(td) / "out")
            )
            with self.assertRaises(BaselineLayoutError):
                _quiet(run_extraction, cfg)
            self.assertFalse((Path(td) / "out").exists())


class TestShowBaseline(unittest.TestCase):
    def test_strips_colour_and_rejects_traversal(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            ts_repo = make_ts_repo(root / "TypeScript")
            ref = ts_repo / "tests" / "baselines" / "reference"
            (ref / "color.errors.txt").write_text(
                "\x1b[91merror\x1b[0m TS2304: Cannot find name 'x'.\n", encoding="utf-8"
            )
            cfg = build_config(environ={}, ts_repo_dir=str(ts_repo), output_dir=str(root / "out"))

            self.assertEqual(
                "error TS2304: Cannot find name 'x'.\n",
                show_baseline(cfg, "color.errors.txt"),
            )
            self.assertEqual(
                "error TS5055: Cannot write file.\n",
                show_baseline(cfg, "project/bar/bar.errors.txt"),
            )
            with self.assertRaises(ValueError):
                show_baseline(cfg, "")
            with self.assertRaises(ValueError):
                show_baseline(cfg, "../../cases/compiler/foo.ts")
            with self.assertRaises(BaselineReadError):
                show_baseline(cfg, "missing.errors.txt")


if __name__ == "__main__":
    unittest.main()
