from git_utils.cli import main

main()
