from runtime_overrides.cli.app import main

main()
