from ipsync.cli import app

app()
