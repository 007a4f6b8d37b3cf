from wait_for.main import main

main()
