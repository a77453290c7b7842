from frostbyte.main import main

main()
