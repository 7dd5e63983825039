from hello_web.app import main

main()
