from fitfocus.cli.main import main

main()
