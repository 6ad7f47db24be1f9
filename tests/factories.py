"""
Raw catalog entry factory shared by the test modules.
"""

from __future__ import annotations

import copy
from typing import Any

SAMPLE_CODE = """
#include <stdio.h>
#include "curlib.h"

int main(void) {
    printf("curlib says \\"hi\\"\\n");
    return 0;
}
"""


def make_entry(**overrides: Any) -> dict[str, Any]:
    """A valid raw catalog entry; keyword arguments replace fields.

    Passing ``None`` for a field removes it.
    """
    entry: dict[str, Any] = {
        "id": "curlib",
        "fsName": "curlib",
        "files": [{"path": "curlib.h", "url": "https://example.org/curlib.h"}],
        "suffixDir": "net",
        "version": "1.2.0",
        "title": "curlib",
        "description": "Tiny HTTP helpers.",
        "categories": "net, http",
        "sampleCode": SAMPLE_CODE,
        "licenseSummary": "MIT",
        "licenseUrl": "https://example.org/LICENSE",
        "worksWellWith": "jsonlite",
        "documentation": [{"url": "https://example.org/docs", "label": "Docs"}],
    }
    for key, value in overrides.items():
        if value is None:
            entry.pop(key, None)
        else:
            entry[key] = value
    return copy.deepcopy(entry)
