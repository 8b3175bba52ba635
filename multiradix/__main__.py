from multiradix.cli import main

main()
