from private_folder.cli import main

main()
