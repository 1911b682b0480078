from eldeps.cli import cli

cli(prog_name="eldeps")
