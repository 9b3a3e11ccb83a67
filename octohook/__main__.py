from octohook.main import run

run()
