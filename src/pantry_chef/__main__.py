from pantry_chef.cli import cli

cli()
