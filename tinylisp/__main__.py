from tinylisp.repl import main

raise SystemExit(main())
