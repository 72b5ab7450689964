"""Spanish interface strings."""

from __future__ import annotations

from dockterm.i18n.english import TranslationSet


def spanish_set() -> TranslationSet:
    """Return the Spanish translation set; entries left empty fall back to English."""
    return TranslationSet(
        pruning_status="limpiando",
        removing_status="eliminando",
        restarting_status="reiniciando",
        starting_status="iniciando",
        stopping_status="terminando",
        upping_service_status="levantando servicio",
        upping_project_status="levantando proyecto",
        downing_status="dando de baja",
        pausing_status="pausando",
        running_custom_command_status="ejecutando comando personalizado",
        running_bulk_command_status="ejecutando comando masivo",
        error_occurred=(
            "¡Hubo un error! Por favor crea un issue en "
            "https://github.com/jesseduffield/lazydocker/issues"
        ),
        connection_failed=(
            "Falló la conexión con el docker client. "
            "Quizá necesitas reiniciar tu docker client"
        ),
        unattachable_container_error=(
            "Container does not support attaching. You must either run the service "
            "with the '-it' flag or use `stdin_open: true, tty: true` in the "
            "docker-compose.yml file"
        ),
        waiting_for_container_info=(
            "No podemos proceder hasta que docker nos de más información sobre el "
            "contenedor. Inténtalo otra vez en unos segundos."
        ),
        cannot_access_docker_socket_error=(
            "No es posible acceder al docker socket en: unix:///var/run/docker.sock\n"
            "Ejecuta lazydocker como root o lee "
            "https://docs.docker.com/install/linux/linux-postinstall/"
        ),
        cannot_kill_child_error=(
            "Esperamos tres segundos a que el proceso hijo se detenga. Debe de haber "
            "un proceso huérfano que continua activo en tu sistema."
        ),
        donate="Donar",
        confirm="Confirmar",
        return_="regresar",
        focus_main="enfocar panel principal",
        lc_filter="filtrar lista",
        navigate="navegar",
        execute="ejecutar",
        close="cerrar",
        quit="salir",
        menu="menú",
        menu_title="Menú",
        open_config="abrir configuración de lazydocker",
        edit_config="editar configuración de lazydocker",
        cancel="cancelar",
        remove="borrar",
        hide_stopped="esconder/mostrar contenedores parados",
        force_remove="borrar(forzado)",
        remove_with_volumes="borrar con volúmenes",
        remove_service="borrar contenedores",
        up_service="levantar servicio",
        stop="parar",
        pause="pausa",
        restart="reiniciar",
        down="bajar proyecto",
        down_with_volumes="bajar proyecto con volúmenes",
        start="iniciar",
        rebuild="recompilar",
        recreate="recrear",
        previous_context="anterior pestaña",
        next_context="siguiente pestaña",
        view_logs="ver logs",
        up_project="levantar proyecto",
        down_project="dar de baja el proyecto",
        remove_image="limpiar imagen",
        remove_volume="limpiar volúmen",
        remove_network="limpiar red",
        remove_without_prune="limpiar sin borrar padres sin etiqueta",
        remove_without_prune_with_force=(
            "limpiar (forzado) sin borrar padres sin etiqueta"
        ),
        remove_with_force="limpiar (forzado)",
        prune_containers="limpiar contenedores finalizados",
        prune_volumes="limpiar volúmenes sin usar",
        prune_networks="limpiar redes sin usar",
        prune_images="limpiar imágenes sin usar",
        stop_all_containers="detener todos los contenedores",
        remove_all_containers="borrar todos los contenedores (forzado)",
        view_restart_options="ver opciones de reinicio",
        exec_shell="ejecutar shell",
        run_custom_command="ejecutar comando personalizado",
        view_bulk_commands="ver comandos masivos",
        filter_list="filtar list",
        open_in_browser="abrir en navegador (first port is http)",
        sort_containers_by_state="ordenar contenedores por estado",
        global_title="Global",
        main_title="Inicio",
        project_title="Proyecto",
        services_title="Servicios",
        containers_title="Contenedores",
        standalone_containers_title="Contenedores independientes",
        images_title="Imágenes",
        volumes_title="Volúmenes",
        networks_title="Redes",
        custom_command_title="Comando personalizado:",
        bulk_command_title="Comando masivo:",
        error_title="Error",
        logs_title="Logs",
        config_title="Configuración",
        env_title="Variables de entorno",
        docker_compose_config_title="Docker-Compose Config",
        top_title="Top",
        stats_title="Estadísticas",
        credits_title="Acerca",
        container_config_title="Configuración",
        container_env_title="Variables de entorno",
        nothing_to_display="Nada que mostrar",
        no_container_for_service=(
            "No hay logs que mostrar; el servicio no está asociado con un contenedor"
        ),
        cannot_display_env_variables=(
            "Algo salió mal mientras se mostraban las variables de entorno"
        ),
        no_containers="Sin contenedores",
        no_container="Sin contenedor",
        no_images="Sin imágenes",
        no_volumes="Sin volúmenes",
        no_networks="Sin redes",
        no_services="Sin servicios",
        confirm_quit="¿Realmente quieres salir?",
        confirm_up_project="¿Realmente quieres levantar tu proyecto docker compose?",
        must_force_to_remove_container=(
            "No puedes borrar un contenedor en ejecución a menos de que lo fuerces, "
            "¿quieres hacerlo?"
        ),
        not_enough_space="No hay suficiente espacio para renderizar los paneles",
        confirm_prune_images="¿Realmente quieres limpiar todas tus imágenes?",
        confirm_prune_containers=(
            "¿Realmente quieres limpiar todos los contenedores finalizados?"
        ),
        confirm_stop_containers="¿Realmente quieres detener todos los contenedores?",
        confirm_remove_containers="¿Realmente quieres borrar todos los contenedores?",
        confirm_prune_volumes="¿Realmente quieres limpiar todos los vólumenes sin usar?",
        confirm_prune_networks="¿Realmente quieres limpiar todas las redes sin usar?",
        stop_service="¿Realmente quieres detener los contenedores de este servicio?",
        stop_container="¿Realmente quieres detener este contenedor?",
        press_enter_to_return=(
            "Presionar [enter] para volver a lazydocker (este mensaje puede ser "
            "desactivado en tu configuración poniendo `gui.returnImmediately: true`)"
        ),
        no="no",
        yes="sí",
        filter_prompt="filtrar",
    )