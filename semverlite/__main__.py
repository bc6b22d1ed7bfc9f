from semverlite.cli import app

app(prog_name="semverlite")
