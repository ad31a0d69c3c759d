from status_api.cli import main

main()
