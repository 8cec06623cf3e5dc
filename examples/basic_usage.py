#!/usr/bin/env python3
"""
Example: Basic usage of csloc as a Python library
"""

from csloc import count_paths, count_text

# Count a source tree
result = count_paths(["/path/to/project/src"], recursive=True)

# Largest files first
for metrics in result.sorted("total_lines", descending=True)[:10]:
    print(f"{metrics.path} ({metrics.language.value})")
    print(f"  code: {metrics.code_count}  comments: {metrics.comment_count}  "
          f"doc: {metrics.doc_comment_count}  blank: {metrics.blank_count}")

totals = result.totals()
print(f"Counted {totals.file_count} file(s), {totals.total_lines} lines, "
      f"{totals.percent(totals.doc_comment_count):.1f}% documented")

# In-memory text
snippet = count_text("/// Adds two numbers.\nint add(int a, int b);\n", path="add.h")
print(f"add.h: {snippet.doc_comment_count} doc, {snippet.code_count} code")
