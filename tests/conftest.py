"""Shared test fixtures for csloc tests."""

import os
import textwrap
from pathlib import Path

import pytest

# main.cpp: doc 5, code 5, comment 1, blank 2
MAIN_CPP = """\
/*!
 * @file main.cpp
 * @brief Entry point.
 */
#include <iostream>

/// Greets the user.
int main() {
  // print greeting
  std::cout << "// not a comment\\n";

  return 0; /* done */
}
"""

# util.h: code 4, comment 2, blank 2
UTIL_H = """\
#ifndef UTIL_H
#define UTIL_H

/* Helpers shared by
   the whole program. */
int add(int a, int b);  // sum

#endif
"""

# legacy.c: doc 1, code 3, comment 1
LEGACY_C = """\
//! Legacy C module
static const char quote = '"';
char *s = "/* not a comment */";
/**/
int legacy(void) { return 1; }
"""

# sub/deep.hpp: code 3, doc 2
DEEP_HPP = """\
namespace deep {
/** Doc block
    spanning lines */
int value();
}
"""


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    """Keep user/project config files and CSLOC_* variables out of every test."""
    home = tmp_path / "home"
    cwd = tmp_path / "cwd"
    home.mkdir()
    cwd.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(cwd)
    for key in [k for k in os.environ if k.startswith("CSLOC_")]:
        monkeypatch.delenv(key)


@pytest.fixture
def c_project(tmp_path):
    """A small C/C++ tree.

    Layout (name order):
        legacy.c, main.cpp, notes.txt, sub/deep.hpp, util.h
    """
    root = tmp_path / "project"
    write_file(root / "main.cpp", MAIN_CPP)
    write_file(root / "util.h", UTIL_H)
    write_file(root / "legacy.c", LEGACY_C)
    write_file(root / "notes.txt", "not source\n")
    write_file(root / "sub" / "deep.hpp", DEEP_HPP)
    return root
