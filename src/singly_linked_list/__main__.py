from singly_linked_list.cli.main import main

raise SystemExit(main())
