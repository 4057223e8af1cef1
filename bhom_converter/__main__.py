from bhom_converter.main import run

run()
