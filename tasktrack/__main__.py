from tasktrack.interfaces.cli.main import main

main()
