from todo_app.cli.main import main

main()
