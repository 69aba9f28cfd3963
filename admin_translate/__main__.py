from admin_translate.cli import main

raise SystemExit(main())
