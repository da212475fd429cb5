from design_copier.cli.main import cli

cli()
