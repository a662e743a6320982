from tokengraph.cli import main

main()
