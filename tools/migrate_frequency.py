# tools/migrate_frequency.py
# One-time conversion of the legacy frequency file, a JS-style object with
# unquoted keys ({abbey: 1.2e-06, ...}), into the JSON mapping read by
# wordle_entropy.resources.load_weights.
import json
import re
import sys

INPUT = sys.argv[1] if len(sys.argv) > 1 else "frequency.txt"
OUTPUT = sys.argv[2] if len(sys.argv) > 2 else "frequency.json"

key_pattern = re.compile(r"(?P<key>\b[a-zA-Z_][a-zA-Z0-9_]*\b)\s*:")

with open(INPUT, "r", encoding="utf-8") as fin:
    raw = fin.read()

weights = json.loads(key_pattern.sub(r'"\g<key>":', raw))

count_in = len(weights)
clean = {}
for word, value in weights.items():
    word = word.lower()
    # only 5-letter words with a non-negative weight
    if len(word) != 5 or not isinstance(value, (int, float)) or value < 0:
        continue
    clean[word] = float(value)

with open(OUTPUT, "w", encoding="utf-8") as fout:
    json.dump(clean, fout, indent=0, sort_keys=True)

print(f"Entries read: {count_in}")
print(f"Weights written: {len(clean)}")
print(f"Saved to: {OUTPUT}")
