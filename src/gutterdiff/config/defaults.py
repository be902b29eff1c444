"""Starter .gutterdiff.toml template."""

DEFAULT_TOML = """\
# gutterdiff configuration
version = "1.0"

[git]
timeout = 30              # seconds per git invocation
include_staged = true     # use the staged diff when the working tree is clean
context_lines = 3         # --unified=N

[output]
format = "terminal"       # terminal | json
show_summary = true
show_content = true

[markers]
# added = "▌"
# modified = "▌"
# deleted = "▁"
# added_style = "green"
# modified_style = "yellow"
# deleted_style = "red"
"""
