from akhq_mcp.server import main

main()
