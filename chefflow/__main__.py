from chefflow.cli import main

raise SystemExit(main())
