from cqlpy.cli import main

raise SystemExit(main())
