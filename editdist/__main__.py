from editdist.cli import main

main()
