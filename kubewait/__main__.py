from kubewait.cmd.cli import main

main()
