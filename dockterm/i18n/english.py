"""The set of interface strings and its English defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TranslationSet:
    """Localised interface strings for one language; unset entries are empty."""

    not_enough_space: str = ""
    project_title: str = ""
    main_title: str = ""
    global_title: str = ""
    navigate: str = ""
    menu: str = ""
    menu_title: str = ""
    execute: str = ""
    scroll: str = ""
    close: str = ""
    quit: str = ""
    error_title: str = ""
    no_view_maching_new_line_focused_switch_statement: str = ""
    open_config: str = ""
    edit_config: str = ""
    confirm_quit: str = ""
    confirm_up_project: str = ""
    error_occurred: str = ""
    connection_failed: str = ""
    unattachable_container_error: str = ""
    waiting_for_container_info: str = ""
    cannot_attach_stopped_container_error: str = ""
    cannot_access_docker_socket_error: str = ""
    cannot_kill_child_error: str = ""

    donate: str = ""
    cancel: str = ""
    custom_command_title: str = ""
    bulk_command_title: str = ""
    remove: str = ""
    hide_stopped: str = ""
    force_remove: str = ""
    remove_with_volumes: str = ""
    must_force_to_remove_container: str = ""
    confirm: str = ""
    return_: str = ""
    focus_main: str = ""
    lc_filter: str = ""
    stop_container: str = ""
    restarting_status: str = ""
    starting_status: str = ""
    stopping_status: str = ""
    upping_project_status: str = ""
    upping_service_status: str = ""
    pausing_status: str = ""
    removing_status: str = ""
    downing_status: str = ""
    running_custom_command_status: str = ""
    running_bulk_command_status: str = ""
    remove_service: str = ""
    up_service: str = ""
    stop: str = ""
    pause: str = ""
    restart: str = ""
    down: str = ""
    down_with_volumes: str = ""
    start: str = ""
    rebuild: str = ""
    recreate: str = ""
    previous_context: str = ""
    next_context: str = ""
    attach: str = ""
    view_logs: str = ""
    up_project: str = ""
    down_project: str = ""
    services_title: str = ""
    containers_title: str = ""
    standalone_containers_title: str = ""
    top_title: str = ""
    images_title: str = ""
    volumes_title: str = ""
    networks_title: str = ""
    no_containers: str = ""
    no_container: str = ""
    no_images: str = ""
    no_volumes: str = ""
    no_networks: str = ""
    no_services: str = ""
    remove_image: str = ""
    remove_volume: str = ""
    remove_network: str = ""
    remove_without_prune: str = ""
    remove_without_prune_with_force: str = ""
    remove_with_force: str = ""
    prune_images: str = ""
    prune_containers: str = ""
    prune_volumes: str = ""
    prune_networks: str = ""
    confirm_prune_containers: str = ""
    confirm_stop_containers: str = ""
    confirm_remove_containers: str = ""
    confirm_prune_images: str = ""
    confirm_prune_volumes: str = ""
    confirm_prune_networks: str = ""
    pruning_status: str = ""
    stop_service: str = ""
    press_enter_to_return: str = ""
    detach_from_container_short_cut: str = ""
    stop_all_containers: str = ""
    remove_all_containers: str = ""
    view_restart_options: str = ""
    exec_shell: str = ""
    run_custom_command: str = ""
    view_bulk_commands: str = ""
    filter_list: str = ""
    open_in_browser: str = ""
    sort_containers_by_state: str = ""

    logs_title: str = ""
    config_title: str = ""
    env_title: str = ""
    docker_compose_config_title: str = ""
    stats_title: str = ""
    credits_title: str = ""
    container_config_title: str = ""
    container_env_title: str = ""
    nothing_to_display: str = ""
    no_container_for_service: str = ""
    cannot_display_env_variables: str = ""

    no: str = ""
    yes: str = ""

    lc_next_screen_mode: str = ""
    lc_prev_screen_mode: str = ""
    filter_prompt: str = ""

    focus_projects: str = ""
    focus_services: str = ""
    focus_containers: str = ""
    focus_images: str = ""
    focus_volumes: str = ""
    focus_networks: str = ""


def english_set() -> TranslationSet:
    """Return the complete English translation set."""
    return TranslationSet(
        pruning_status="pruning",
        removing_status="removing",
        restarting_status="restarting",
        starting_status="starting",
        stopping_status="stopping",
        upping_service_status="upping service",
        upping_project_status="upping project",
        downing_status="downing",
        pausing_status="pausing",
        running_custom_command_status="running custom command",
        running_bulk_command_status="running bulk command",
        no_view_maching_new_line_focused_switch_statement=(
            "No view matching newLineFocused switch statement"
        ),
        error_occurred=(
            "An error occurred! Please create an issue at "
            "https://github.com/jesseduffield/lazydocker/issues"
        ),
        connection_failed=(
            "connection to container engine client failed. "
            "You may need to restart the container engine service"
        ),
        unattachable_container_error=(
            "Container does not support attaching. You must either run the service "
            "with the '-it' flag or use `stdin_open: true, tty: true` in the "
            "docker-compose.yml file"
        ),
        waiting_for_container_info=(
            "Cannot proceed until the container engine gives us more information "
            "about the container. Please retry in a few moments."
        ),
        cannot_attach_stopped_container_error=(
            "You cannot attach to a stopped container, you need to start it first "
            "(which you can actually do with the 'r' key) (yes I'm too lazy to do "
            "this automatically for you) (pretty cool that I get to communicate "
            "one-on-one with you in the form of an error message though)"
        ),
        cannot_access_docker_socket_error=(
            "Can't access container engine socket. This could be a permissions issue.\n"
            "Run lazydocker as root or read "
            "https://docs.docker.com/install/linux/linux-postinstall/ (for Docker) "
            "or https://podman.io/docs/installation (for Podman)"
        ),
        cannot_kill_child_error=(
            "Waited three seconds for child process to stop. There may be an orphan "
            "process that continues to run on your system."
        ),
        donate="Donate",
        confirm="Confirm",
        return_="return",
        focus_main="focus main panel",
        lc_filter="filter list",
        navigate="navigate",
        execute="execute",
        close="close",
        quit="quit",
        menu="menu",
        menu_title="Menu",
        scroll="scroll",
        open_config="open lazydocker config",
        edit_config="edit lazydocker config",
        cancel="cancel",
        remove="remove",
        hide_stopped="hide/show stopped containers",
        force_remove="force remove",
        remove_with_volumes="remove with volumes",
        remove_service="remove containers",
        up_service="up service",
        stop="stop",
        pause="pause",
        restart="restart",
        down="down project",
        down_with_volumes="down project with volumes",
        start="start",
        rebuild="rebuild",
        recreate="recreate",
        previous_context="previous tab",
        next_context="next tab",
        attach="attach",
        view_logs="view logs",
        up_project="up project",
        down_project="down project",
        remove_image="remove image",
        remove_volume="remove volume",
        remove_network="remove network",
        remove_without_prune="remove without deleting untagged parents",
        remove_without_prune_with_force="remove (forced) without deleting untagged parents",
        remove_with_force="remove (forced)",
        prune_containers="prune exited containers",
        prune_volumes="prune unused volumes",
        prune_networks="prune unused networks",
        prune_images="prune unused images",
        stop_all_containers="stop all containers",
        remove_all_containers="remove all containers (forced)",
        view_restart_options="view restart options",
        exec_shell="exec shell",
        run_custom_command="run predefined custom command",
        view_bulk_commands="view bulk commands",
        filter_list="filter list",
        open_in_browser="open in browser (first port is http)",
        sort_containers_by_state="sort containers by state",
        global_title="Global",
        main_title="Main",
        project_title="Project",
        services_title="Services",
        containers_title="Containers",
        standalone_containers_title="Standalone Containers",
        images_title="Images",
        volumes_title="Volumes",
        networks_title="Networks",
        custom_command_title="Custom Command:",
        bulk_command_title="Bulk Command:",
        error_title="Error",
        logs_title="Logs",
        config_title="Config",
        env_title="Env",
        docker_compose_config_title="Compose Config",
        top_title="Top",
        stats_title="Stats",
        credits_title="About",
        container_config_title="Container Config",
        container_env_title="Container Env",
        nothing_to_display="Nothing to display",
        no_container_for_service="No logs to show; service is not associated with a container",
        cannot_display_env_variables="Something went wrong while displaying environment variables",
        no_containers="No containers",
        no_container="No container",
        no_images="No images",
        no_volumes="No volumes",
        no_networks="No networks",
        no_services="No services",
        confirm_quit="Are you sure you want to quit?",
        confirm_up_project="Are you sure you want to 'up' your docker compose project?",
        must_force_to_remove_container=(
            "You cannot remove a running container unless you force it. "
            "Do you want to force it?"
        ),
        not_enough_space="Not enough space to render panels",
        confirm_prune_images="Are you sure you want to prune all unused images?",
        confirm_prune_containers="Are you sure you want to prune all stopped containers?",
        confirm_stop_containers="Are you sure you want to stop all containers?",
        confirm_remove_containers="Are you sure you want to remove all containers?",
        confirm_prune_volumes="Are you sure you want to prune all unused volumes?",
        confirm_prune_networks="Are you sure you want to prune all unused networks?",
        stop_service="Are you sure you want to stop this service's containers?",
        stop_container="Are you sure you want to stop this container?",
        press_enter_to_return=(
            "Press enter to return to lazydocker (this prompt can be disabled in your "
            "config by setting `gui.returnImmediately: true`)"
        ),
        detach_from_container_short_cut=(
            "By default, to detach from the container press ctrl-p then ctrl-q"
        ),
        no="no",
        yes="yes",
        lc_next_screen_mode="next screen mode (normal/half/fullscreen)",
        lc_prev_screen_mode="prev screen mode",
        filter_prompt="filter",
        focus_projects="focus projects panel",
        focus_services="focus services panel",
        focus_containers="focus containers panel",
        focus_images="focus images panel",
        focus_volumes="focus volumes panel",
        focus_networks="focus networks panel",
    )