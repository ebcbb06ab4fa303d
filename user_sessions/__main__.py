from user_sessions.cli import main

main()
