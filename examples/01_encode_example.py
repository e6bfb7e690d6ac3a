from __future__ import annotations

import datetime
from dataclasses import dataclass

from toon_codec import (
    EncodeOptions,
    compare_with_json,
    decode,
    encode,
    encode_pipe_delimited,
)


@dataclass
class Employee:
    id: int
    name: str
    team: str
    hired: datetime.date


payload = {
    "company": "Acme, Inc.",
    "employees": [
        Employee(1, "Ada", "core", datetime.date(2021, 3, 1)),
        Employee(2, "Grace", "infra", datetime.date(2022, 7, 15)),
        Employee(3, "Linus", "core", datetime.date(2023, 1, 9)),
    ],
    "tags": ["python", "toon", "llm"],
    "settings": {"retries": 3, "timeout": 2.5, "debug": False},
}

text = encode(payload)
print(text)
print()

print(encode_pipe_delimited(payload))
print()

print(encode(payload, EncodeOptions.readable()))
print()

# the decoded tree holds plain dicts/lists; dates come back as ISO strings
print(decode(text))

cmp = compare_with_json(payload)
print(f"TOON {cmp.toon_chars} chars vs JSON {cmp.json_chars} chars ({cmp.savings_percent_label} saved)")
