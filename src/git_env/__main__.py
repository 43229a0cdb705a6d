from git_env.app import main

main()
