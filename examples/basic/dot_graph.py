"""Export a small graph as DOT text with graphdoc combinators."""

from graphdoc import brackets, double_quotes, export, indent, literal, unlines

vertices = ["a", "b", "c"]
edges = [("a", "b", "1"), ("b", "c", "2")]

body = [indent(2, double_quotes(literal(v))) for v in vertices]
body += [
    indent(2, double_quotes(literal(x)))
    + literal(" -> ")
    + double_quotes(literal(y))
    + literal(" ")
    + brackets(literal("weight=") + double_quotes(literal(w)))
    for x, y, w in edges
]

doc = unlines([literal("digraph"), literal("{"), *body, literal("}")])
print(export(doc))
