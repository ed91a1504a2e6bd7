"""
Summary: Check that every module opting into a Summary/Why header writes it in full.
Why: Half-converted headers are easy to miss when a docstring is edited.
"""

from __future__ import annotations

from pathlib import Path

import pytest

PACKAGE_ROOT: Path = Path(__file__).resolve().parents[1] / "src" / "m3usweep"
EXPECTED_LAYOUT: tuple[str, ...] = ('"""', "Summary: ", "Why: ", '"""')


def _opts_in(path: Path) -> bool:
    head = path.read_text(encoding="utf-8").splitlines()[:6]
    return any(line.lstrip('"').startswith("Summary:") for line in head)


def _summary_modules() -> list[Path]:
    """Modules whose docstring opens with a ``Summary:`` line."""

    return sorted(path for path in PACKAGE_ROOT.rglob("*.py") if _opts_in(path))


def test_some_modules_use_summary_headers() -> None:
    assert len(_summary_modules()) >= 5


@pytest.mark.parametrize(
    "module_path",
    _summary_modules(),
    ids=lambda path: str(path.relative_to(PACKAGE_ROOT)),
)
def test_summary_header_layout(module_path: Path) -> None:
    """Opening quotes, Summary, Why and closing quotes on four separate lines."""

    head = module_path.read_text(encoding="utf-8").splitlines()[: len(EXPECTED_LAYOUT)]

    assert len(head) == len(EXPECTED_LAYOUT), f"{module_path} header is truncated"
    for line, expected in zip(head, EXPECTED_LAYOUT, strict=True):
        if expected == '"""':
            assert line.strip() == expected, f"{module_path}: expected {expected!r}, got {line!r}"
        else:
            assert line.startswith(expected), f"{module_path}: expected {expected!r} prefix, got {line!r}"
            assert line.removeprefix(expected).strip(), f"{module_path}: empty {expected.strip()} text"
