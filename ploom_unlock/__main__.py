from ploom_unlock.main import main

main()
