"""HTML views for the layout, catalog browsing and detail, planner and skills grid."""