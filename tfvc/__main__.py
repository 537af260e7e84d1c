from tfvc.cli.app import main

main()
