from addon_loader.cli.cli import main

main()
