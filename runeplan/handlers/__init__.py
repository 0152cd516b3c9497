"""Request handlers for the catalog, planner, goal actions and skills grid."""