"""
sexpr Reader Demo

Walks through the reader API:
1. Parse the classic demo form and print it back
2. Walk a list's spine, proper and dotted
3. Quote sugar and structural sharing
4. Errors abort one form; reading continues

Run: pip install -e . && python examples/demo/demo.py
"""

from sexpr import (
    NIL, Parser, ReaderError, Tokenizer, concat, iterate, make_list, parse, parse_all,
)

print("=== sexpr Reader Demo ===\n")

# 1. Parse and print
src = '(this is (a 42 #t "list"))'
for form in Tokenizer(src).parse():
    print("1. Parsed form")
    print(f"   {form}\n")

# 2. Spine walks
proper = parse("(a b c)")
dotted = parse("(a b . c)")
print("2. Spine walks")
for form in (proper, dotted):
    items = list(iterate(form))
    shape = "proper" if items[-1] is NIL else "dotted"
    print(f"   {form}: {len(items) - 1} heads, {shape}")
print()

# 3. Quote sugar and sharing
quoted = parse("'(x y)")
print("3. Quote sugar")
print(f"   'x reads as {quoted}")
shared = parse("(z)")
joined = concat(make_list(*parse_all("p q")), shared)
print(f"   {joined} shares its tail: {joined.tail.tail is shared}\n")

# 4. Error recovery
print("4. Error recovery")
parser = Parser("(ok 1) (bad . ) (fine 2) (open")
while True:
    try:
        form = parser.next_form()
    except ReaderError as e:
        print(f"   error: {e}")
        continue
    if form is None:
        break
    print(f"   read: {form}")

print("\n=== Demo Complete ===")
