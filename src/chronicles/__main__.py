from chronicles.core.cli import main

main()
