from tree_relay.main import main

main()
