from review_reminder.cli import main

main()
