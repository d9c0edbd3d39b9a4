from ghstats.cli.app import main

main()
