from arma_xgettext.cli.app import app

app(prog_name="arma-xgettext")
