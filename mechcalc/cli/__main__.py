from mechcalc.cli.main import main

main()
