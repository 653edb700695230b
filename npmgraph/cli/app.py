"""
Main CLI application for npmgraph.

Defines the Typer application structure and command routing,
keeping the CLI layer thin.
"""
import typer

from npmgraph.cli.commands.tree import tree_command


# Initialize Typer app
app = typer.Typer(help="npmgraph - dependency graphs from installed npm packages")

# Register commands
app.command("tree", help="Build the dependency graph of an npm project.")(tree_command)


@app.callback()
def main():
    """npmgraph - dependency graphs from installed npm packages.

    Run 'npmgraph tree [DIR]' to walk the packages installed below DIR.
    """
