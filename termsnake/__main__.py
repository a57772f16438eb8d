from termsnake.main import run

run()
