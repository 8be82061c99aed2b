from stoichio.cli import app

app(prog_name="stoichio")
