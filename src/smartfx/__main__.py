from smartfx.app import main

main()
