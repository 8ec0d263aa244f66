"""Parse and render a chat message in 3 lines — zero config, zero deps."""

from chatmark import parse, render

doc = parse("> are we on?\n*yes*, at _9_\n- bring `laptop`")
html = render(doc)
print(html)
