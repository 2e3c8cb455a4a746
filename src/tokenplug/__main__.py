from tokenplug.cli import main

main()
