from paygate.main import run

run()
