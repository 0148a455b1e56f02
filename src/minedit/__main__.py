from minedit.adapters.textual.app import main

main()
