from lunchtray.main import main

main()
