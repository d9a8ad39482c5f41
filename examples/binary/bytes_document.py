"""Build a binary document; textual literals are encoded on export."""

from graphdoc import ExportConfig, double_quotes, export, export_config_context, literal, new_line

doc = double_quotes(literal("café".encode("latin-1"))) + new_line()

with export_config_context(ExportConfig(encoding="latin-1")):
    data = export(doc)

print(data)  # b'"caf\xe9"\n'
