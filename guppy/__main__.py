from guppy.cli import main

main()
