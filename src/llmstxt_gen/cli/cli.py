"""CLI entrypoint: Typer app definition and command registration"""

import typer

from llmstxt_gen.cli.commands import generate_cmd, list_cmd, main_callback, transform_cmd


app = typer.Typer(name="llmstxt-gen", no_args_is_help=True, help="Generate llms.txt from MD/MDX documentation")

app.callback()(main_callback)
app.command(name="generate")(generate_cmd)
app.command(name="list")(list_cmd)
app.command(name="transform")(transform_cmd)
