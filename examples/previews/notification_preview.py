"""Build notification previews: plain text, no markup, quoted lines dropped."""

from chatmark import DictParseCache, Quote, parse, render_plain, transform

cache = DictParseCache()

messages = [
    "> can you send the invoice?\nSure, *attached* below",
    "1. sign\n2. ~scan~ photograph\n3. send",
    "> can you send the invoice?\nSure, *attached* below",
]

for message in messages:
    doc = parse(message, cache=cache)
    reply_only = transform(doc, lambda n: None if isinstance(n, Quote) else n)
    print(render_plain(reply_only).replace("\n", " / "))

print(f"{len(cache)} distinct messages parsed")
