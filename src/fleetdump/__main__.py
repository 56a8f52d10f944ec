from fleetdump.cli import main

main()
