from lilacstat.cli.app import main

main()
