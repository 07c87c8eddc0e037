from classmcp.main import main

main()
