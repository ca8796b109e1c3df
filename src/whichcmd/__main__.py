from whichcmd.cli import main

main()
